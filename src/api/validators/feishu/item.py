"""Validação de itens do lote antes do build.

As opções aceitas vêm do mesmo FIELD_SCHEMA usado pelos builders.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.feishu.fields import FIELD_SCHEMA
from app.constants.feishu import MessageType
from app.protocols.validator import ValidationError
from config.settings.feishu import WEBHOOK_URL_PREFIXES

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import WebhookItem


def validate_webhook_url(webhook_url: str) -> None:
    """Exige URL http(s) não vazia.

    Raises:
        ValidationError: Se URL ausente ou com esquema inválido
    """
    if not webhook_url or not webhook_url.strip():
        raise ValidationError("webhook_url is required")
    if not webhook_url.strip().startswith(WEBHOOK_URL_PREFIXES):
        raise ValidationError("webhook_url must start with http:// or https://")


def validate_message_type(message_type: str) -> None:
    """Exige msg_type suportado."""
    valid = {member.value for member in MessageType}
    if message_type not in valid:
        raise ValidationError(
            f"message_type must be one of {sorted(valid)}, got {message_type!r}"
        )


def validate_field_choices(fields: Mapping[str, Any]) -> None:
    """Campos de opção informados precisam estar entre as opções declaradas.

    Valores vazios (None/"") são tratados como não informados.
    """
    for name, value in fields.items():
        spec = FIELD_SCHEMA.get(name)
        if spec is None or spec.choices is None or value in (None, ""):
            continue
        if not isinstance(value, str) or value not in spec.choices:
            raise ValidationError(
                f"{name} must be one of {sorted(spec.choices)}, got {value!r}"
            )


class FeishuItemValidator:
    """Validador de WebhookItem (URL, msg_type e campos de opção)."""

    def validate_item(self, item: WebhookItem) -> None:
        """Valida o item.

        Args:
            item: Item com webhook_url já resolvida

        Raises:
            ValidationError: Na primeira regra violada
        """
        validate_webhook_url(item.webhook_url)
        validate_message_type(item.message_type)
        validate_field_choices(item.fields)
