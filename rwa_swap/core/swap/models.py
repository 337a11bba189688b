"""Typed models used by the swap subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..chain_types import ChainId, normalize_address


class AssetCategory(str, Enum):
    """Routing category of a selectable token. Exactly one applies per token."""
    PRIVATE_RESTRICTED = "private_restricted"
    PUBLIC_TOKENIZED_EQUITY = "public_tokenized_equity"
    ORDINARY = "ordinary"


class SwapLegRole(str, Enum):
    """Which side of the pending swap a selection affects."""
    SOURCE = "source"
    DESTINATION = "destination"

    @classmethod
    def parse(cls, value: Union[str, "SwapLegRole"]) -> "SwapLegRole":
        """Accept the enum, its value, or the search component's sell/buy names."""
        if isinstance(value, cls):
            return value
        lowered = str(value).strip().lower()
        if lowered in ("sell", "from"):
            return cls.SOURCE
        if lowered in ("buy", "to"):
            return cls.DESTINATION
        return cls(lowered)


class FormField(str, Enum):
    """Field names understood by the widget's form ref."""
    FROM_CHAIN = "fromChain"
    FROM_TOKEN = "fromToken"
    TO_CHAIN = "toChain"
    TO_TOKEN = "toToken"
    FROM_AMOUNT = "fromAmount"


@dataclass(frozen=True)
class Token:
    """A selectable token as delivered by the search index or static catalog."""
    chain_id: ChainId
    address: str
    symbol: str = ""
    name: str = ""
    decimals: int = 18
    logo_uri: Optional[str] = None

    @property
    def key(self) -> tuple:
        """Identity: chain id plus comparison-normalized address."""
        return (self.chain_id, normalize_address(self.address))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "address": self.address,
            "symbol": self.symbol,
            "name": self.name,
            "decimals": self.decimals,
            "chainId": self.chain_id,
        }
        if self.logo_uri:
            data["logoURI"] = self.logo_uri
        return data


@dataclass(frozen=True)
class TokenSelectionEvent:
    role: SwapLegRole
    token: Token


@dataclass(frozen=True)
class FieldSetCommand:
    """One ``setFieldValue`` call against the widget form."""
    field: FormField
    value: Any
    set_url_search_param: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field.value,
            "value": self.value,
            "setUrlSearchParam": self.set_url_search_param,
        }


@dataclass
class SwapFormState:
    """Live form values of the embedded widget."""
    source_chain: Optional[ChainId] = None
    source_token: Optional[str] = None
    destination_chain: Optional[ChainId] = None
    destination_token: Optional[str] = None
    amount: Optional[str] = None

    _FIELD_ATTRS = {
        FormField.FROM_CHAIN: "source_chain",
        FormField.FROM_TOKEN: "source_token",
        FormField.TO_CHAIN: "destination_chain",
        FormField.TO_TOKEN: "destination_token",
        FormField.FROM_AMOUNT: "amount",
    }

    def apply(self, command: FieldSetCommand) -> None:
        setattr(self, self._FIELD_ATTRS[command.field], command.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            FormField.FROM_CHAIN.value: self.source_chain,
            FormField.FROM_TOKEN.value: self.source_token,
            FormField.TO_CHAIN.value: self.destination_chain,
            FormField.TO_TOKEN.value: self.destination_token,
            FormField.FROM_AMOUNT.value: self.amount,
        }
