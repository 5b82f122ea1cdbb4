"""Factory para obter o builder correto por tipo de mensagem."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from api.payload_builders.feishu.base import PayloadBuilder
from api.payload_builders.feishu.fields import FieldBag
from api.payload_builders.feishu.interactive import InteractivePayloadBuilder
from api.payload_builders.feishu.post import PostPayloadBuilder
from api.payload_builders.feishu.text import (
    ImagePayloadBuilder,
    ShareChatPayloadBuilder,
    TextPayloadBuilder,
)
from app.constants.feishu import MessageType
from config.logging import log_fallback

logger = logging.getLogger(__name__)

# Mapeamento de tipo de mensagem para builder
_BUILDERS: dict[MessageType, PayloadBuilder] = {
    MessageType.TEXT: TextPayloadBuilder(),
    MessageType.POST: PostPayloadBuilder(),
    MessageType.SHARE_CHAT: ShareChatPayloadBuilder(),
    MessageType.IMAGE: ImagePayloadBuilder(),
    MessageType.INTERACTIVE: InteractivePayloadBuilder(),
}


def get_payload_builder(message_type: str) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de mensagem.

    Args:
        message_type: Valor de msg_type (ex: "text", "interactive")

    Returns:
        Builder apropriado ou None se não suportado
    """
    try:
        return _BUILDERS.get(MessageType(message_type))
    except ValueError:
        return None


def build_request_body(
    message_type: str,
    fields: FieldBag | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Constrói o corpo JSON do webhook para o tipo de mensagem.

    Função pura: não faz IO e não levanta erro para entradas malformadas.
    Tipo de mensagem desconhecido resulta em documento vazio.

    Args:
        message_type: Tipo de mensagem
        fields: Field Bag (ou mapping simples, convertido em FieldBag)

    Returns:
        Documento pronto para POST (sem assinatura)
    """
    bag = fields if isinstance(fields, FieldBag) else FieldBag(fields)
    builder = get_payload_builder(message_type)
    if builder is None:
        log_fallback(logger, "payload_builder", reason="unsupported_message_type")
        return {}
    return builder.build(bag)
