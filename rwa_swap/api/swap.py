from typing import Any, Dict, List, Literal, Optional, Union

from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict, Field

from ..core.swap import (
    InMemorySwapForm,
    SwapFormState,
    SwapIntentResolver,
    SwapLegRole,
    Token,
    TokenSelectionEvent,
    get_asset_classifier,
)
from ..core.swap.widget import build_widget_config
from ..services.token_catalog import get_token_catalog


router = APIRouter(prefix="/swap")


class TokenPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    address: str = Field(description="Token address in the chain's native format")
    chain_id: int = Field(alias="chainId", description="Chain id as reported by the token search index")
    symbol: str = Field(default="", description="Token symbol")
    name: str = Field(default="", description="Token name")
    decimals: int = Field(default=18, ge=0, description="Token decimals")
    logo_uri: Optional[str] = Field(default=None, alias="logoURI", description="Token logo URL")

    def to_token(self) -> Token:
        return Token(
            chain_id=self.chain_id,
            address=self.address,
            symbol=self.symbol,
            name=self.name,
            decimals=self.decimals,
            logo_uri=self.logo_uri,
        )


class SwapFormPayload(BaseModel):
    fromChain: Optional[int] = None
    fromToken: Optional[str] = None
    toChain: Optional[int] = None
    toToken: Optional[str] = None
    fromAmount: Optional[str] = None

    def to_state(self) -> SwapFormState:
        return SwapFormState(
            source_chain=self.fromChain,
            source_token=self.fromToken,
            destination_chain=self.toChain,
            destination_token=self.toToken,
            amount=self.fromAmount,
        )


class SwapIntentRequest(BaseModel):
    role: Literal["source", "destination", "sell", "buy"] = Field(
        description="Swap leg the selection applies to (sell = source, buy = destination)"
    )
    token: TokenPayload
    state: Optional[SwapFormPayload] = Field(
        default=None, description="Current widget form values, if known"
    )


class FieldSetCommandPayload(BaseModel):
    field: str
    value: Union[int, str]
    setUrlSearchParam: bool


class SwapIntentResponse(BaseModel):
    role: str
    category: str
    commands: List[FieldSetCommandPayload]
    state: Dict[str, Any]


@router.post("/intent")
async def post_swap_intent(req: SwapIntentRequest) -> SwapIntentResponse:
    """Resolve a token selection into ordered widget field-set commands."""
    token = req.token.to_token()
    role = SwapLegRole.parse(req.role)

    form = InMemorySwapForm(req.state.to_state() if req.state else None)
    resolver = SwapIntentResolver(controller=form)
    commands = resolver.handle_selection(TokenSelectionEvent(role=role, token=token))

    return SwapIntentResponse(
        role=role.value,
        category=get_asset_classifier().classify(token).value,
        commands=[FieldSetCommandPayload(**command.to_dict()) for command in commands],
        state=form.state.to_dict(),
    )


@router.get("/widget-config")
async def get_widget_config(
    chain_id: Optional[int] = Query(default=None, alias="chainId", description="Connected wallet chain id"),
) -> Dict[str, Any]:
    """Initial swap widget configuration with the featured token list."""
    featured = [token.to_dict() for token in get_token_catalog().featured()]
    return build_widget_config(featured, chain_id=chain_id)
