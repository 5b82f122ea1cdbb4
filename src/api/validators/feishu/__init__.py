"""Validadores de entrada para o webhook Feishu.

Uso:
    from api.validators.feishu import FeishuItemValidator, ValidationError

    validator = FeishuItemValidator()
    validator.validate_item(item)
"""

from api.validators.feishu.item import (
    FeishuItemValidator,
    validate_field_choices,
    validate_message_type,
    validate_webhook_url,
)
from app.protocols.validator import ValidationError

__all__ = [
    "FeishuItemValidator",
    "ValidationError",
    "validate_field_choices",
    "validate_message_type",
    "validate_webhook_url",
]
