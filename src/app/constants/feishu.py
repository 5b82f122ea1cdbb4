"""Enums de domínio para mensagens do bot customizado Feishu/Lark."""

from __future__ import annotations

from enum import StrEnum


class MessageType(StrEnum):
    """Tipos de mensagem aceitos pelo webhook do bot customizado."""

    TEXT = "text"
    POST = "post"
    SHARE_CHAT = "share_chat"
    IMAGE = "image"
    INTERACTIVE = "interactive"


class CardMode(StrEnum):
    """Modos de montagem do cartão interativo."""

    SIMPLE = "simple"
    FORM = "form"
    RAW = "raw"


class PostLanguage(StrEnum):
    """Idiomas do bloco de rich text (post)."""

    ZH_CN = "zh_cn"
    EN_US = "en_us"
    BOTH = "both"


class PostElementType(StrEnum):
    """Elementos inline de um parágrafo de post."""

    TEXT = "text"
    LINK = "a"
    AT = "at"
    IMG = "img"


class CardElementTag(StrEnum):
    """Tags de elementos do cartão 2.0 (schema 2.0)."""

    MARKDOWN = "markdown"
    PLAIN_TEXT = "plain_text"
    BUTTON = "button"
    IMG = "img"
    HR = "hr"
    PERSON = "person"
    PERSON_LIST = "person_list"
    COLUMN_SET = "column_set"
    INTERACTIVE_CONTAINER = "interactive_container"
    COLLAPSIBLE_PANEL = "collapsible_panel"
    FORM = "form"


CONTAINER_TAGS: frozenset[str] = frozenset(
    {
        CardElementTag.COLUMN_SET,
        CardElementTag.INTERACTIVE_CONTAINER,
        CardElementTag.COLLAPSIBLE_PANEL,
        CardElementTag.FORM,
    }
)

# Campos discriminadores por contexto: topo do body, dentro de coluna, dentro de container.
# A ordem define a precedência da leitura.
ELEMENT_TYPE_KEYS: tuple[str, ...] = ("elementType", "col_elType", "c_elType")
