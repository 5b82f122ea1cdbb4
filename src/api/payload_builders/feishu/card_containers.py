"""Containers do cartão 2.0 e despacho recursivo de elementos.

Containers (column_set, interactive_container, collapsible_panel, form)
possuem uma sequência própria de elementos filhos, construída pelo mesmo
despacho, sem limite de profundidade.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from api.payload_builders.feishu.card_elements import (
    ElementRecord,
    build_simple_element,
    element_type,
    has_element_type,
    new_element,
)
from api.payload_builders.feishu.values import (
    parse_json_or_empty,
    put_if,
    to_number,
    to_ordered_list,
    trimmed,
)
from app.constants.feishu import CONTAINER_TAGS, CardElementTag

_FORM_CHILD_TYPE_KEYS = ("elementType", "c_elType")


def _is_container(tag: Any) -> bool:
    return isinstance(tag, str) and tag in CONTAINER_TAGS


def build_elements(raw: Any) -> list[dict[str, Any]]:
    """Constrói elementos filhos de coluna ou container."""
    elements: list[dict[str, Any]] = []
    for el in to_ordered_list(raw):
        if not has_element_type(el):
            continue
        if _is_container(el.get("elementType")):
            elements.append(build_card_element(el))
        else:
            elements.append(build_simple_element(el))
    return elements


def build_form_elements(raw: Any) -> list[dict[str, Any]]:
    """Filhos de form: botões recebem `form_action_type` e `name`."""
    elements: list[dict[str, Any]] = []
    for el in to_ordered_list(raw):
        if not has_element_type(el):
            continue
        if _is_container(element_type(el, _FORM_CHILD_TYPE_KEYS)):
            elements.append(build_card_element(el))
            continue
        out = build_simple_element(el)
        if out.get("tag") == CardElementTag.BUTTON:
            put_if(out, "form_action_type", el.get("form_action_type"))
            put_if(out, "name", trimmed(el.get("form_button_name")))
        elements.append(out)
    return elements


def build_body_elements(raw: Any) -> list[dict[str, Any]]:
    """Elementos do topo do body; apenas `elementType` é considerado."""
    return [
        build_card_element(el)
        for el in to_ordered_list(raw)
        if isinstance(el, Mapping) and el.get("elementType")
    ]


def _column_set(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.COLUMN_SET.value
    for key in ("flex_mode", "horizontal_spacing", "horizontal_align", "margin", "background_style"):
        put_if(out, key, el.get(key))
    out["columns"] = [
        build_column(col) for col in to_ordered_list(el.get("columns")) if isinstance(col, Mapping)
    ]


def build_column(col: Mapping[str, Any]) -> dict[str, Any]:
    """Coluna de um column_set com seus próprios elementos."""
    column: dict[str, Any] = {"tag": "column"}
    put_if(column, "width", col.get("column_width"))
    if col.get("column_weight") is not None:
        column["weight"] = to_number(col["column_weight"]) or 1
    for key in (
        "vertical_align",
        "vertical_spacing",
        "direction",
        "padding",
        "margin",
        "background_style",
    ):
        put_if(column, key, col.get(key))
    column["elements"] = build_elements(col.get("column_elements"))
    return column


def _interactive_container(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.INTERACTIVE_CONTAINER.value
    put_if(out, "width", el.get("container_width"))
    for key in (
        "direction",
        "horizontal_spacing",
        "horizontal_align",
        "vertical_align",
        "vertical_spacing",
        "background_style",
    ):
        put_if(out, key, el.get(key))
    if el.get("has_border") is not None:
        out["has_border"] = bool(el["has_border"])
    for key in ("border_color", "padding", "corner_radius"):
        put_if(out, key, el.get(key))
    put_if(out, "behaviors", build_behaviors(el))
    out["elements"] = build_elements(el.get("container_elements"))


def build_behaviors(el: ElementRecord) -> list[dict[str, Any]]:
    """Behaviors de clique do interactive_container (open_url ou callback)."""
    behaviors: list[dict[str, Any]] = []
    action_type = el.get("action_type")
    action_url = el.get("action_url")

    if action_type == "open_url" and action_url:
        behaviors.append(
            {
                "type": "open_url",
                "default_url": action_url,
                "pc_url": el.get("action_pc_url") or action_url,
                "ios_url": el.get("action_ios_url") or action_url,
                "android_url": el.get("action_android_url") or action_url,
            }
        )

    callback_value = el.get("callback_value")
    if action_type == "callback" and callback_value is not None:
        value = parse_json_or_empty(callback_value, component="card_callback_value")
        behaviors.append({"type": "callback", "value": value})

    return behaviors


def _collapsible_panel(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.COLLAPSIBLE_PANEL.value
    if el.get("panel_expanded") is not None:
        out["expanded"] = bool(el["panel_expanded"])

    title = trimmed(el.get("panel_header_title"))
    if title:
        header: dict[str, Any] = {"title": {"tag": "plain_text", "content": title}}
        put_if(header, "background_color", el.get("panel_header_background_color"))
        out["header"] = header

    put_if(out, "background_color", el.get("panel_background_color"))

    border: dict[str, Any] = {}
    put_if(border, "color", el.get("panel_border_color"))
    put_if(border, "corner_radius", el.get("panel_border_corner_radius"))
    put_if(out, "border", border)

    out["elements"] = build_elements(el.get("container_elements"))


def _form(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.FORM.value
    if el.get("form_name"):
        out["name"] = str(el["form_name"])
    out["elements"] = build_form_elements(el.get("container_elements"))


_CONTAINER_BUILDERS: dict[str, Callable[[ElementRecord, dict[str, Any]], None]] = {
    CardElementTag.COLUMN_SET: _column_set,
    CardElementTag.INTERACTIVE_CONTAINER: _interactive_container,
    CardElementTag.COLLAPSIBLE_PANEL: _collapsible_panel,
    CardElementTag.FORM: _form,
}


def build_card_element(el: ElementRecord) -> dict[str, Any]:
    """Constrói um elemento do body (container ou folha).

    Args:
        el: Registro bruto; containers são decididos por `elementType`

    Returns:
        Elemento serializado
    """
    tag = el.get("elementType")
    builder = _CONTAINER_BUILDERS.get(tag) if isinstance(tag, str) else None
    if builder is None:
        return build_simple_element(el)
    out = new_element(el)
    builder(el, out)
    return out
