"""Casos de uso do canal Feishu."""

from app.use_cases.feishu.send_webhook_batch import (
    SendWebhookBatchUseCase,
    WebhookItemError,
)

__all__ = [
    "SendWebhookBatchUseCase",
    "WebhookItemError",
]
