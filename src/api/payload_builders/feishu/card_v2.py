"""Montagem do cartão 2.0 (cardMode = form) a partir dos campos card2_*."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.feishu.card_containers import build_body_elements
from api.payload_builders.feishu.values import put_if, trimmed

if TYPE_CHECKING:
    from api.payload_builders.feishu.fields import FieldBag

CARD_SCHEMA_VERSION = "2.0"

# Placeholder para o body nunca ficar vazio
EMPTY_BODY_ELEMENT: dict[str, str] = {"tag": "markdown", "content": " "}

_CARD_LINK_FIELDS = (
    ("url", "card2_card_link_url"),
    ("pc_url", "card2_card_link_pc_url"),
    ("ios_url", "card2_card_link_ios_url"),
    ("android_url", "card2_card_link_android_url"),
)


def build_card_config(fields: FieldBag) -> dict[str, Any]:
    """Bloco `config`: summary, width_mode e enable_forward."""
    config: dict[str, Any] = {"update_multi": True}
    summary = trimmed(fields["card2_config_summary"])
    if summary:
        config["summary"] = {"content": summary}
    put_if(config, "width_mode", fields["card2_config_width_mode"])
    config["enable_forward"] = bool(fields["card2_config_enable_forward"])
    return config


def build_card_link(fields: FieldBag) -> dict[str, str]:
    """Links multiplataforma do cartão; vazio se nenhum foi informado."""
    card_link: dict[str, str] = {}
    for key, field_name in _CARD_LINK_FIELDS:
        value = fields[field_name]
        if value:
            card_link[key] = str(value)
    return card_link


def build_card_header(fields: FieldBag) -> dict[str, Any] | None:
    """Header com título, subtítulo e template de cor; None sem título."""
    title = fields["card2_header_title"] or ""
    if not title:
        return None

    header: dict[str, Any] = {"title": {"tag": "plain_text", "content": title}}
    subtitle = fields["card2_header_subtitle"]
    if subtitle:
        header["subtitle"] = {"tag": "plain_text", "content": str(subtitle)}
    template = fields["card2_header_template"]
    if template and template != "default":
        header["template"] = template
    return header


def build_card_body(fields: FieldBag) -> dict[str, Any]:
    """Body com direction, padding e elementos recursivos."""
    body: dict[str, Any] = {"direction": fields["card2_body_direction"] or "vertical"}
    padding = fields["card2_body_padding"]
    if padding:
        body["padding"] = str(padding)
    elements = build_body_elements(fields["card2_body_elements"])
    body["elements"] = elements or [dict(EMPTY_BODY_ELEMENT)]
    return body


def build_form_card(fields: FieldBag) -> dict[str, Any]:
    """Constrói o cartão 2.0 completo.

    Args:
        fields: Field Bag com os campos card2_*

    Returns:
        Card com schema, config, card_link opcional, header opcional e body
    """
    card: dict[str, Any] = {"schema": CARD_SCHEMA_VERSION}
    card["config"] = build_card_config(fields)
    put_if(card, "card_link", build_card_link(fields))
    put_if(card, "header", build_card_header(fields))
    card["body"] = build_card_body(fields)
    return card
