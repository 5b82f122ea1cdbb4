"""Schema declarativo do Field Bag (nome do campo → default).

Fonte única de defaults e opções válidas, consumida pelos builders e pelo
validador de entrada (api.validators.feishu).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from app.constants.feishu import CardMode, PostLanguage


@dataclass(frozen=True)
class FieldSpec:
    """Default e opções aceitas de um campo."""

    default: Any
    choices: frozenset[str] | None = None


HEADER_TEMPLATES = frozenset(
    {
        "default",
        "blue",
        "wathet",
        "turquoise",
        "green",
        "yellow",
        "orange",
        "red",
        "carmine",
        "violet",
        "purple",
        "indigo",
        "grey",
    }
)

FIELD_SCHEMA: dict[str, FieldSpec] = {
    # text / share_chat / image
    "text": FieldSpec(""),
    "shareChatId": FieldSpec(""),
    "imageKey": FieldSpec(""),
    # post
    "postLanguage": FieldSpec(
        PostLanguage.ZH_CN.value,
        frozenset(lang.value for lang in PostLanguage),
    ),
    "postTitle": FieldSpec(""),
    "postParagraphs": FieldSpec([]),
    # interactive
    "cardMode": FieldSpec(CardMode.SIMPLE.value, frozenset(mode.value for mode in CardMode)),
    "cardHeaderTitle": FieldSpec(""),
    "cardBodyMarkdown": FieldSpec(""),
    "cardButtonText": FieldSpec(""),
    "cardButtonUrl": FieldSpec(""),
    "cardJson": FieldSpec(""),
    # interactive / form (cartão 2.0)
    "card2_config_summary": FieldSpec(""),
    "card2_config_width_mode": FieldSpec("default", frozenset({"default", "compact", "fill"})),
    "card2_config_enable_forward": FieldSpec(True),
    "card2_card_link_url": FieldSpec(""),
    "card2_card_link_pc_url": FieldSpec(""),
    "card2_card_link_ios_url": FieldSpec(""),
    "card2_card_link_android_url": FieldSpec(""),
    "card2_header_title": FieldSpec(""),
    "card2_header_subtitle": FieldSpec(""),
    "card2_header_template": FieldSpec("default", HEADER_TEMPLATES),
    "card2_body_direction": FieldSpec("vertical", frozenset({"vertical", "horizontal"})),
    "card2_body_padding": FieldSpec(""),
    "card2_body_elements": FieldSpec([]),
}


def field_default(name: str) -> Any:
    """Retorna o default declarado (cópia rasa para listas/dicts)."""
    spec = FIELD_SCHEMA.get(name)
    if spec is None:
        return None
    default = spec.default
    if isinstance(default, list | dict):
        return type(default)(default)
    return default


class FieldBag(Mapping[str, Any]):
    """Mapping imutável de campos com fallback para o default do schema.

    Chaves ausentes (ou com valor None) resolvem para o default declarado em
    FIELD_SCHEMA; campos desconhecidos são mantidos mas ignorados pelos builders.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, name: str) -> Any:
        value = self._values.get(name)
        if value is None:
            if name not in self._values and name not in FIELD_SCHEMA:
                raise KeyError(name)
            return field_default(name)
        return value

    def __iter__(self) -> Iterator[str]:
        return iter({**dict.fromkeys(FIELD_SCHEMA), **self._values})

    def __len__(self) -> int:
        return len(FIELD_SCHEMA.keys() | self._values.keys())

    def provided(self, name: str) -> bool:
        """True se o campo foi informado explicitamente (não-None)."""
        return self._values.get(name) is not None

    def __repr__(self) -> str:
        return f"FieldBag(keys={sorted(self._values)})"
