"""Elementos folha do cartão 2.0 (markdown, button, img, hr, person, person_list).

Cada registro bruto traz o tipo em um dos campos de ELEMENT_TYPE_KEYS,
conforme o contexto onde foi configurado (body, coluna ou container).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from api.payload_builders.feishu.values import pick, put_if, to_number, to_ordered_list, trimmed
from app.constants.feishu import ELEMENT_TYPE_KEYS, CardElementTag

ElementRecord = Mapping[str, Any]


def element_type(el: ElementRecord, keys: tuple[str, ...] = ELEMENT_TYPE_KEYS) -> Any:
    """Retorna o primeiro discriminador não-None, respeitando a ordem de `keys`."""
    for key in keys:
        value = el.get(key)
        if value is not None:
            return value
    return None


def has_element_type(el: Any) -> bool:
    """True se o registro tem algum discriminador preenchido."""
    return isinstance(el, Mapping) and any(el.get(key) for key in ELEMENT_TYPE_KEYS)


def new_element(el: ElementRecord) -> dict[str, Any]:
    """Objeto de saída inicial, com `element_id` quando informado."""
    out: dict[str, Any] = {}
    put_if(out, "element_id", trimmed(el.get("element_id")))
    return out


def _markdown(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.MARKDOWN.value
    out["content"] = str(pick(el, "content", ""))


def _button(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.BUTTON.value
    out["text"] = {"tag": "plain_text", "content": str(pick(el, "button_text", ""))}
    out["url"] = str(pick(el, "button_url", ""))
    out["type"] = el.get("button_type") or "default"


def _img(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.IMG.value
    out["img_key"] = pick(el, "img_key", "")


def _hr(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.HR.value


def _person(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.PERSON.value
    out["user_id"] = pick(el, "user_id", "")
    put_if(out, "size", el.get("person_size"))
    _put_bool(out, "show_avatar", el.get("person_show_avatar"))
    _put_bool(out, "show_name", el.get("person_show_name"))
    put_if(out, "style", el.get("person_style"))
    put_if(out, "margin", trimmed(el.get("person_margin")))


def _person_list(el: ElementRecord, out: dict[str, Any]) -> None:
    out["tag"] = CardElementTag.PERSON_LIST.value
    out["persons"] = normalize_persons(el.get("person_list_ids"))
    put_if(out, "size", el.get("person_list_size"))
    _put_bool(out, "show_avatar", el.get("person_list_show_avatar"))
    _put_bool(out, "show_name", el.get("person_list_show_name"))

    lines = to_number(el.get("person_list_lines"))
    put_if(out, "lines", lines, when=lines is not None and lines > 0)

    _put_bool(out, "drop_invalid_user_id", el.get("person_list_drop_invalid"))
    put_if(out, "margin", trimmed(el.get("person_list_margin")))
    put_if(out, "icon", _person_list_icon(el))


def normalize_persons(raw: Any) -> list[dict[str, str]]:
    """Lista de `{"id": ...}` sem IDs vazios, na ordem original."""
    persons: list[dict[str, str]] = []
    for person in to_ordered_list(raw):
        if not isinstance(person, Mapping):
            continue
        person_id = trimmed(person.get("id"))
        if person_id:
            persons.append({"id": person_id})
    return persons


def _person_list_icon(el: ElementRecord) -> dict[str, Any] | None:
    # token padrão tem precedência sobre imagem customizada
    token = trimmed(el.get("person_list_icon_token"))
    if token:
        icon: dict[str, Any] = {"tag": "standard_icon", "token": token}
        put_if(icon, "color", trimmed(el.get("person_list_icon_color")))
        return icon
    img_key = trimmed(el.get("person_list_icon_img_key"))
    if img_key:
        return {"tag": "custom_icon", "img_key": img_key}
    return None


def _put_bool(out: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        out[key] = bool(value)


_LEAF_BUILDERS: dict[str, Callable[[ElementRecord, dict[str, Any]], None]] = {
    CardElementTag.MARKDOWN: _markdown,
    CardElementTag.PLAIN_TEXT: _markdown,
    CardElementTag.BUTTON: _button,
    CardElementTag.IMG: _img,
    CardElementTag.HR: _hr,
    CardElementTag.PERSON: _person,
    CardElementTag.PERSON_LIST: _person_list,
}


def build_simple_element(el: ElementRecord) -> dict[str, Any]:
    """Constrói elemento folha.

    Discriminador desconhecido produz objeto sem `tag` (apenas `element_id`,
    se houver), que o chamador deve tratar como elemento descartado.

    Args:
        el: Registro bruto do elemento

    Returns:
        Elemento serializado conforme cartão 2.0
    """
    out = new_element(el)
    tag = element_type(el)
    builder = _LEAF_BUILDERS.get(tag) if isinstance(tag, str) else None
    if builder is not None:
        builder(el, out)
    return out
