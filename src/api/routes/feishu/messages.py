"""Endpoint de envio em lote para o webhook do bot customizado Feishu.

Endpoints:
- POST /feishu/messages: constrói, assina e entrega cada item do lote

Resposta:
- 200 com um resultado por item (sucesso ou `{"error": ...}` quando
  continue_on_fail está ativo)
- 502 quando um item falha e o lote é abortado
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.bootstrap import get_send_webhook_batch_use_case
from app.observability import reset_correlation_id, set_correlation_id
from app.protocols.models import WebhookItem  # noqa: TC001 - usado em runtime pelo Pydantic
from app.use_cases.feishu import SendWebhookBatchUseCase, WebhookItemError
from config.settings import get_feishu_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class SendBatchRequest(BaseModel):
    """Lote de mensagens a enviar."""

    items: list[WebhookItem] = Field(..., min_length=1)
    continue_on_fail: bool | None = Field(
        default=None,
        description="Sobrescreve FEISHU_CONTINUE_ON_FAIL para este lote.",
    )


@router.post("/messages")
async def send_messages(
    request: Request,
    body: SendBatchRequest,
    use_case: Annotated[SendWebhookBatchUseCase, Depends(get_send_webhook_batch_use_case)],
) -> JSONResponse:
    """Processa o lote e devolve o resultado de cada item."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        continue_on_fail = body.continue_on_fail
        if continue_on_fail is None:
            continue_on_fail = get_feishu_settings().continue_on_fail

        try:
            results = await use_case.execute(body.items, continue_on_fail=continue_on_fail)
        except WebhookItemError as exc:
            logger.warning(
                "feishu_batch_aborted",
                extra={"item_index": exc.item_index, "item_count": len(body.items)},
            )
            return JSONResponse(
                status_code=status.HTTP_502_BAD_GATEWAY,
                content={"error": exc.message, "item_index": exc.item_index},
            )

        content: dict[str, Any] = {
            "results": [
                {
                    "item_index": result.item_index,
                    "success": result.success,
                    "json": result.as_output(),
                }
                for result in results
            ]
        }
        return JSONResponse(status_code=status.HTTP_200_OK, content=content)
    finally:
        reset_correlation_id(token)
