"""Use case para envio em lote ao webhook do bot customizado Feishu."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.protocols.models import WebhookItem, WebhookItemResult

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.validator import WebhookItemValidatorProtocol
    from app.protocols.webhook_sender import WebhookSenderProtocol
    from config.settings import FeishuSettings

    Signer = Callable[[dict[str, Any], str], dict[str, Any]]

logger = logging.getLogger(__name__)


class WebhookItemError(Exception):
    """Falha de um item com o lote abortado (continue_on_fail desligado)."""

    def __init__(self, item_index: int, message: str) -> None:
        super().__init__(message)
        self.item_index = item_index
        self.message = message


class SendWebhookBatchUseCase:
    """Orquestra validação, build, assinatura e envio por item.

    Os itens são processados em sequência. Cada item é isolado: a falha de
    um item vira `{"error": ...}` no resultado (continue_on_fail) ou aborta
    o lote com WebhookItemError.
    """

    def __init__(
        self,
        validator: WebhookItemValidatorProtocol,
        builder: PayloadBuilderProtocol,
        signer: Signer,
        sender: WebhookSenderProtocol,
        settings: FeishuSettings | None = None,
    ) -> None:
        self._validator = validator
        self._builder = builder
        self._signer = signer
        self._sender = sender
        self._settings = settings

    async def execute(
        self,
        items: Sequence[WebhookItem],
        continue_on_fail: bool = False,
    ) -> list[WebhookItemResult]:
        """Processa o lote.

        Args:
            items: Itens na ordem de entrada
            continue_on_fail: Registrar erro e seguir em vez de abortar

        Returns:
            Um resultado por item, na mesma ordem

        Raises:
            WebhookItemError: Primeira falha quando continue_on_fail=False
        """
        results: list[WebhookItemResult] = []
        for index, item in enumerate(items):
            try:
                response = await self.send_item(item)
            except Exception as exc:
                logger.warning(
                    "feishu_item_failed",
                    extra={
                        "item_index": index,
                        "message_type": item.message_type,
                        "error_type": type(exc).__name__,
                    },
                )
                if not continue_on_fail:
                    raise WebhookItemError(index, str(exc)) from exc
                results.append(
                    WebhookItemResult(item_index=index, success=False, error=str(exc))
                )
                continue

            results.append(
                WebhookItemResult(item_index=index, success=True, response=response)
            )
        return results

    async def send_item(self, item: WebhookItem) -> dict[str, Any]:
        """Valida, constrói, assina (se houver segredo) e envia um item.

        Returns:
            Response JSON do Feishu
        """
        resolved = self._resolve_defaults(item)
        self._validator.validate_item(resolved)

        started_at = time.perf_counter()
        payload = self._builder(resolved.message_type, resolved.fields)
        if resolved.sign_secret:
            # timestamp gerado aqui, imediatamente antes do envio
            payload = self._signer(payload, resolved.sign_secret)

        response = await self._sender.send_webhook(resolved.webhook_url, payload)
        logger.info(
            "feishu_item_sent",
            extra={
                "message_type": resolved.message_type,
                "signed": bool(resolved.sign_secret),
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
        return response

    def _resolve_defaults(self, item: WebhookItem) -> WebhookItem:
        """Completa webhook_url/sign_secret com os defaults das settings."""
        if self._settings is None:
            return item
        updates: dict[str, str] = {}
        if not item.webhook_url and self._settings.webhook_url:
            updates["webhook_url"] = self._settings.webhook_url
        if not item.sign_secret and self._settings.sign_secret:
            updates["sign_secret"] = self._settings.sign_secret
        return item.model_copy(update=updates) if updates else item
