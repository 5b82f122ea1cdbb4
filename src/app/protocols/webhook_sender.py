"""Protocolos de entrega no webhook.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class WebhookSenderProtocol(Protocol):
    """Contrato mínimo para o cliente HTTP do webhook."""

    async def send_webhook(
        self,
        webhook_url: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]: ...
