"""Builder para cartões interativos (msg_type = interactive).

Modos:
- simple: header + corpo lark_md + botão de link opcional
- form: cartão 2.0 montado a partir dos campos card2_*
- raw: JSON completo informado pelo usuário
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.payload_builders.feishu.base import build_base_payload
from api.payload_builders.feishu.card_v2 import build_form_card
from api.payload_builders.feishu.values import parse_json_or_empty
from app.constants.feishu import CardMode, MessageType
from config.logging import log_fallback

if TYPE_CHECKING:
    from api.payload_builders.feishu.fields import FieldBag

logger = logging.getLogger(__name__)

# Placeholder do modo simples quando não há corpo nem botão
EMPTY_SIMPLE_ELEMENT: dict[str, Any] = {
    "tag": "div",
    "text": {"tag": "plain_text", "content": " "},
}


def build_raw_card(raw_card: Any) -> dict[str, Any]:
    """Usa o JSON informado como card; {} se inválido ou não for objeto."""
    card = parse_json_or_empty(raw_card, component="card_json")
    if isinstance(card, Mapping):
        return dict(card)
    log_fallback(logger, "card_json", reason="not_an_object")
    return {}


def _build_simple_elements(fields: FieldBag) -> list[dict[str, Any]]:
    body_markdown = fields["cardBodyMarkdown"] or ""
    button_text = fields["cardButtonText"] or ""
    button_url = fields["cardButtonUrl"] or ""

    elements: list[dict[str, Any]] = []
    if body_markdown:
        elements.append(
            {
                "tag": "div",
                "text": {"tag": "lark_md", "content": body_markdown},
            }
        )
    if button_text and button_url:
        elements.append(
            {
                "tag": "action",
                "actions": [
                    {
                        "tag": "button",
                        "text": {"content": button_text, "tag": "plain_text"},
                        "url": button_url,
                        "type": "default",
                        "value": {},
                    }
                ],
            }
        )
    return elements


def build_simple_card(fields: FieldBag) -> dict[str, Any]:
    """Cartão legado de dois slots (corpo + ação).

    Sem corpo e sem botão, o card recebe um div com um espaço para não
    ficar estruturalmente vazio.
    """
    card: dict[str, Any] = {}
    header_title = fields["cardHeaderTitle"] or ""
    if header_title:
        card["header"] = {"title": {"tag": "plain_text", "content": header_title}}
    elements = _build_simple_elements(fields)
    card["elements"] = elements or [
        {"tag": "div", "text": dict(EMPTY_SIMPLE_ELEMENT["text"])}
    ]
    return card


class InteractivePayloadBuilder:
    """Builder para mensagens de cartão interativo."""

    def build(self, fields: FieldBag) -> dict[str, Any]:
        """Constrói payload de cartão conforme `cardMode`.

        Modos desconhecidos caem no modo simples.

        Args:
            fields: Field Bag do item

        Returns:
            `{"msg_type": "interactive", "card": {...}}`
        """
        card_mode = fields["cardMode"] or CardMode.SIMPLE.value

        if card_mode == CardMode.RAW:
            card = build_raw_card(fields["cardJson"])
        elif card_mode == CardMode.FORM:
            card = build_form_card(fields)
        else:
            card = build_simple_card(fields)

        return build_base_payload(MessageType.INTERACTIVE.value, "card", card)
