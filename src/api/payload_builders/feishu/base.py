"""Contrato comum dos builders de payload Feishu."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from api.payload_builders.feishu.fields import FieldBag


class PayloadBuilder(Protocol):
    """Builder de um tipo de mensagem (msg_type)."""

    def build(self, fields: FieldBag) -> dict[str, Any]: ...


def build_base_payload(msg_type: str, content_key: str, content: Any) -> dict[str, Any]:
    """Monta o envelope `{msg_type, <content_key>: content}` do webhook."""
    return {
        "msg_type": msg_type,
        content_key: content,
    }
