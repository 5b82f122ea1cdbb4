"""Protocolos de validação dos itens do lote."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import WebhookItem


class ValidationError(Exception):
    """Erro de validação de item."""


class WebhookItemValidatorProtocol(Protocol):
    """Contrato mínimo para validação de itens."""

    def validate_item(self, item: WebhookItem) -> None: ...
