"""Builders para mensagens de texto, cartão de grupo e imagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.feishu.base import build_base_payload
from app.constants.feishu import MessageType

if TYPE_CHECKING:
    from api.payload_builders.feishu.fields import FieldBag


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(self, fields: FieldBag) -> dict[str, Any]:
        """Constrói payload de texto.

        Args:
            fields: Field Bag do item

        Returns:
            `{"msg_type": "text", "content": {"text": ...}}`
        """
        return build_base_payload(MessageType.TEXT.value, "content", {"text": fields["text"]})


class ShareChatPayloadBuilder:
    """Builder para compartilhamento de grupo (share_chat)."""

    def build(self, fields: FieldBag) -> dict[str, Any]:
        return build_base_payload(
            MessageType.SHARE_CHAT.value,
            "content",
            {"share_chat_id": fields["shareChatId"]},
        )


class ImagePayloadBuilder:
    """Builder para imagem já enviada (image_key)."""

    def build(self, fields: FieldBag) -> dict[str, Any]:
        return build_base_payload(
            MessageType.IMAGE.value,
            "content",
            {"image_key": fields["imageKey"]},
        )
