"""Protocolos e contratos do core da aplicação."""

from .models import WebhookItem, WebhookItemResult
from .payload_builder import PayloadBuilderProtocol
from .validator import ValidationError, WebhookItemValidatorProtocol
from .webhook_sender import WebhookSenderProtocol

__all__ = [
    "PayloadBuilderProtocol",
    "ValidationError",
    "WebhookItem",
    "WebhookItemResult",
    "WebhookItemValidatorProtocol",
    "WebhookSenderProtocol",
]
