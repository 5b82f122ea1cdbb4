"""Contratos de entrada/saída do envio em lote para o webhook Feishu."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookItem(BaseModel):
    """Um item do lote: destino, assinatura e Field Bag da mensagem."""

    model_config = ConfigDict(extra="ignore")

    webhook_url: str = Field(
        default="",
        description="URL do hook; vazio usa FEISHU_WEBHOOK_URL.",
    )
    sign_secret: str = Field(
        default="",
        description="Segredo de assinatura; vazio usa FEISHU_SIGN_SECRET.",
        repr=False,
    )
    message_type: str = Field(default="text", description="msg_type do Feishu.")
    fields: dict[str, Any] = Field(
        default_factory=dict,
        description="Field Bag (text, postParagraphs, card2_*, ...).",
    )


class WebhookItemResult(BaseModel):
    """Resultado do envio de um item."""

    item_index: int = Field(..., ge=0)
    success: bool
    response: dict[str, Any] | None = None
    error: str | None = None

    def as_output(self) -> dict[str, Any]:
        """Response do Feishu em caso de sucesso, `{"error": ...}` em falha."""
        if self.success:
            return dict(self.response or {})
        return {"error": self.error or ""}
