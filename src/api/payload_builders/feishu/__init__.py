"""Builders de payload para o webhook do bot customizado Feishu/Lark.

Este pacote contém builders especializados por tipo de mensagem. O ponto
de entrada é `build_request_body(message_type, fields)`.
"""

from api.payload_builders.feishu.base import PayloadBuilder, build_base_payload
from api.payload_builders.feishu.factory import build_request_body, get_payload_builder
from api.payload_builders.feishu.fields import FIELD_SCHEMA, FieldBag, FieldSpec
from api.payload_builders.feishu.values import to_ordered_list

__all__ = [
    "FIELD_SCHEMA",
    "FieldBag",
    "FieldSpec",
    "PayloadBuilder",
    "build_base_payload",
    "build_request_body",
    "get_payload_builder",
    "to_ordered_list",
]
