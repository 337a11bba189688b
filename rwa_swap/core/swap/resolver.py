"""
Swap-Intent Resolver

Turns a token selection from the search component into the complete set of
widget form values for that selection. Destination selections of restricted
venue assets and tokenized equities also pin the source leg to the matching
quote asset.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..chain_types import CHAIN_ID_REMAP, ChainId, ChainIdRemap
from .classifier import AssetClassifier, get_asset_classifier
from .constants import RESTRICTED_VENUE_QUOTE_ADDRESS
from .models import (
    AssetCategory,
    FieldSetCommand,
    FormField,
    SwapFormState,
    SwapLegRole,
    Token,
    TokenSelectionEvent,
)

logger = logging.getLogger(__name__)


class FormControlUnavailable(RuntimeError):
    """The widget form is not mounted or rejected a field update."""


class SwapFormController(ABC):
    """Field-control surface exposed by the embedded swap widget."""

    @abstractmethod
    def set_field_value(self, field: str, value: Any, *, set_url_search_param: bool = True) -> None:
        """Set one named form field, optionally mirroring it into the URL."""
        pass


class InMemorySwapForm(SwapFormController):
    """Controller backed by a local ``SwapFormState`` (server-side sessions and tests)."""

    def __init__(self, state: Optional[SwapFormState] = None) -> None:
        self.state = state or SwapFormState()
        self.url_params: dict[str, Any] = {}

    def set_field_value(self, field: str, value: Any, *, set_url_search_param: bool = True) -> None:
        command = FieldSetCommand(FormField(field), value, set_url_search_param)
        self.state.apply(command)
        if set_url_search_param:
            self.url_params[field] = value


class SwapIntentResolver:
    """
    Resolves token selections into ordered widget field-set commands.

    Commands always come chain-before-token and source-before-destination so
    the widget never observes a (chain, token) pair that did not exist together.
    Every resolution is a full, fresh sequence; a newer selection supersedes an
    older one rather than merging with it.

    Usage:
        resolver = SwapIntentResolver(controller=form)
        search = TokenSearch(on_select=resolver.handle_token_select)
    """

    def __init__(
        self,
        *,
        classifier: Optional[AssetClassifier] = None,
        controller: Optional[SwapFormController] = None,
        remap: ChainIdRemap = CHAIN_ID_REMAP,
        restricted_quote_address: str = RESTRICTED_VENUE_QUOTE_ADDRESS,
        persist_to_address_bar: bool = True,
    ) -> None:
        self.classifier = classifier or get_asset_classifier()
        self.controller = controller
        self.remap = remap
        self.restricted_quote_address = restricted_quote_address
        self.persist_to_address_bar = persist_to_address_bar

    def attach(self, controller: SwapFormController) -> None:
        self.controller = controller

    def detach(self) -> None:
        self.controller = None

    def resolve(self, event: TokenSelectionEvent) -> List[FieldSetCommand]:
        """Compute the command sequence for a selection without issuing it."""
        token = event.token
        if not token.address:
            return []

        if event.role == SwapLegRole.SOURCE:
            return self._leg(SwapLegRole.SOURCE, token.chain_id, token.address)

        category = self.classifier.classify(token)

        if category == AssetCategory.PRIVATE_RESTRICTED:
            return [
                *self._leg(SwapLegRole.SOURCE, token.chain_id, self.restricted_quote_address),
                *self._leg(SwapLegRole.DESTINATION, token.chain_id, token.address),
            ]

        if category == AssetCategory.PUBLIC_TOKENIZED_EQUITY:
            chain_id = self.classifier.settlement_chain_id
            return [
                *self._leg(SwapLegRole.SOURCE, chain_id, self.classifier.reference_stable_address),
                *self._leg(SwapLegRole.DESTINATION, chain_id, token.address),
            ]

        return self._leg(SwapLegRole.DESTINATION, token.chain_id, token.address)

    def handle_selection(self, event: TokenSelectionEvent) -> List[FieldSetCommand]:
        """Resolve and push a selection into the widget; returns the applied commands.

        A missing widget drops the whole sequence. A widget that fails partway
        keeps the commands it already accepted and the rest are dropped, so the
        returned prefix is what the form now holds. Nothing is retried; the
        next selection re-issues a complete state.
        """
        commands = self.resolve(event)
        if not commands:
            return []

        if self.controller is None:
            logger.warning(
                "Swap form not mounted; dropping %d commands for %s %s",
                len(commands), event.role.value, event.token.symbol or event.token.address,
            )
            return []

        applied: List[FieldSetCommand] = []
        try:
            for command in commands:
                self.controller.set_field_value(
                    command.field.value,
                    command.value,
                    set_url_search_param=command.set_url_search_param,
                )
                applied.append(command)
        except FormControlUnavailable as exc:
            logger.warning(
                "Swap form rejected %s after %d of %d commands, dropping the rest: %s",
                commands[len(applied)].field.value, len(applied), len(commands), exc,
            )
            return applied
        except Exception:
            logger.exception("Error setting token on swap form")
            return applied

        logger.info(
            "Token set on swap form: role=%s symbol=%s address=%s chain=%s",
            event.role.value, event.token.symbol, event.token.address, event.token.chain_id,
        )
        return commands

    def handle_token_select(self, token: Token, role: SwapLegRole | str) -> List[FieldSetCommand]:
        """Callback handed to the token search component."""
        return self.handle_selection(TokenSelectionEvent(role=SwapLegRole.parse(role), token=token))

    def _leg(self, role: SwapLegRole, chain_id: ChainId, address: str) -> List[FieldSetCommand]:
        if role == SwapLegRole.SOURCE:
            chain_field, token_field = FormField.FROM_CHAIN, FormField.FROM_TOKEN
        else:
            chain_field, token_field = FormField.TO_CHAIN, FormField.TO_TOKEN
        return [
            FieldSetCommand(chain_field, self.remap.to_widget(chain_id), self.persist_to_address_bar),
            FieldSetCommand(token_field, address, self.persist_to_address_bar),
        ]
