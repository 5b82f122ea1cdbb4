"""Builder para mensagens rich text (post)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.payload_builders.feishu.base import build_base_payload
from api.payload_builders.feishu.values import pick, to_ordered_list
from app.constants.feishu import MessageType, PostElementType, PostLanguage

if TYPE_CHECKING:
    from api.payload_builders.feishu.fields import FieldBag


def _build_text(el: Mapping[str, Any]) -> dict[str, Any]:
    return {"tag": "text", "text": pick(el, "text", "")}


def _build_link(el: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "tag": "a",
        "text": pick(el, "linkText", ""),
        "href": pick(el, "href", ""),
    }


def _build_at(el: Mapping[str, Any]) -> dict[str, Any]:
    at_el: dict[str, Any] = {"tag": "at", "user_id": pick(el, "userId", "all")}
    if el.get("userName"):
        at_el["user_name"] = el["userName"]
    return at_el


def _build_img(el: Mapping[str, Any]) -> dict[str, Any]:
    return {"tag": "img", "image_key": pick(el, "imageKey", "")}


_POST_ELEMENT_BUILDERS = {
    PostElementType.TEXT: _build_text,
    PostElementType.LINK: _build_link,
    PostElementType.AT: _build_at,
    PostElementType.IMG: _build_img,
}


def build_post_element(el: Mapping[str, Any]) -> dict[str, Any]:
    """Serializa um elemento inline; tipos desconhecidos viram texto."""
    tag = el.get("elementType")
    builder = _POST_ELEMENT_BUILDERS.get(tag) if isinstance(tag, str) else None
    if builder is None:
        return {"tag": "text", "text": str(pick(el, "text", ""))}
    return builder(el)


def build_post_content(paragraphs: Any) -> list[list[dict[str, Any]]]:
    """Converte parágrafos (lista ou dict indexado) em listas de elementos.

    Elementos sem `elementType` são descartados; parágrafo sem elementos
    resulta em lista vazia.
    """
    content: list[list[dict[str, Any]]] = []
    for para in to_ordered_list(paragraphs):
        raw_elements = para.get("elements") if isinstance(para, Mapping) else None
        content.append(
            [
                build_post_element(el)
                for el in to_ordered_list(raw_elements)
                if isinstance(el, Mapping) and el.get("elementType")
            ]
        )
    return content


class PostPayloadBuilder:
    """Builder para post com bloco em zh_cn, en_us ou ambos."""

    def build(self, fields: FieldBag) -> dict[str, Any]:
        """Constrói payload de post.

        Com `postLanguage == "both"` os dois idiomas recebem blocos iguais,
        porém independentes (sem compartilhar referência).

        Args:
            fields: Field Bag do item

        Returns:
            `{"msg_type": "post", "content": {"post": {...}}}`
        """
        lang = fields["postLanguage"] or PostLanguage.ZH_CN.value
        title = fields["postTitle"] or ""
        content = build_post_content(fields["postParagraphs"])

        post: dict[str, Any] = {}
        if lang in (PostLanguage.ZH_CN, PostLanguage.BOTH):
            post["zh_cn"] = {"title": title, "content": content}
        if lang in (PostLanguage.EN_US, PostLanguage.BOTH):
            post["en_us"] = {
                "title": title,
                "content": [list(paragraph) for paragraph in content],
            }

        return build_base_payload(MessageType.POST.value, "content", {"post": post})
