"""Helpers de logging para o webhook Feishu (sem segredos nem conteúdo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from .api_errors import FeishuApiError

logger = logging.getLogger(__name__)


def redact_webhook_url(url: str) -> str:
    """Remove o token do hook, mantendo esquema e host.

    `https://open.feishu.cn/open-apis/bot/v2/hook/xxxx` → `https://open.feishu.cn/...`
    """
    parts = urlsplit(url)
    if not parts.netloc:
        return "<invalid-url>"
    return f"{parts.scheme}://{parts.netloc}/..."


def log_api_error(api_error: FeishuApiError, webhook_url: str) -> None:
    """Loga erro de aplicação do Feishu."""
    logger.warning(
        "feishu_api_error",
        extra={
            "endpoint": redact_webhook_url(webhook_url),
            "error_code": api_error.code,
        },
    )


def log_success(webhook_url: str, status_code: int) -> None:
    """Loga sucesso do envio."""
    logger.debug(
        "feishu_webhook_sent",
        extra={
            "endpoint": redact_webhook_url(webhook_url),
            "status_code": status_code,
        },
    )
