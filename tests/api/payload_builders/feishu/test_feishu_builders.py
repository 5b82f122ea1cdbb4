"""Testes para api.payload_builders.feishu.

Cobre: text, share_chat, image, post, interactive (simple, raw, form)
e factory.
"""

from __future__ import annotations

from typing import Any

import pytest

from api.payload_builders.feishu import (
    FIELD_SCHEMA,
    FieldBag,
    build_request_body,
    get_payload_builder,
)
from api.payload_builders.feishu.interactive import (
    InteractivePayloadBuilder,
    build_raw_card,
)
from api.payload_builders.feishu.post import build_post_element
from api.payload_builders.feishu.text import TextPayloadBuilder


def _paragraphs(*elements: dict[str, Any]) -> list[dict[str, Any]]:
    return [{"elements": list(elements)}]


class TestTextBuilders:
    """Testes para text, share_chat e image."""

    def test_text_uses_field(self) -> None:
        body = build_request_body("text", {"text": "olá"})
        assert body == {"msg_type": "text", "content": {"text": "olá"}}

    @pytest.mark.parametrize("fields", [None, {}, {"text": None}])
    def test_text_defaults_to_empty_string(self, fields: dict[str, Any] | None) -> None:
        body = build_request_body("text", fields)
        assert body["content"]["text"] == ""

    def test_share_chat(self) -> None:
        body = build_request_body("share_chat", {"shareChatId": "oc_123"})
        assert body == {"msg_type": "share_chat", "content": {"share_chat_id": "oc_123"}}

    def test_image(self) -> None:
        body = build_request_body("image", {"imageKey": "img_v2_abc"})
        assert body == {"msg_type": "image", "content": {"image_key": "img_v2_abc"}}


class TestPostBuilder:
    """Testes para msg_type=post."""

    def test_default_language_is_zh_cn(self) -> None:
        body = build_request_body("post", {"postTitle": "Título"})
        assert body["msg_type"] == "post"
        assert list(body["content"]["post"]) == ["zh_cn"]
        assert body["content"]["post"]["zh_cn"] == {"title": "Título", "content": []}

    def test_en_us_only(self) -> None:
        body = build_request_body("post", {"postLanguage": "en_us"})
        assert list(body["content"]["post"]) == ["en_us"]

    def test_both_languages_have_identical_blocks(self) -> None:
        fields = {
            "postLanguage": "both",
            "postTitle": "Aviso",
            "postParagraphs": _paragraphs(
                {"elementType": "text", "text": "Olá "},
                {"elementType": "a", "linkText": "docs", "href": "https://example.com"},
            ),
        }

        post = build_request_body("post", fields)["content"]["post"]

        assert set(post) == {"zh_cn", "en_us"}
        assert post["zh_cn"] == post["en_us"]
        assert post["zh_cn"]["content"] is not post["en_us"]["content"]

    def test_elements_without_type_are_dropped(self) -> None:
        fields = {
            "postParagraphs": _paragraphs(
                {"text": "sem tipo"},
                {"elementType": "text", "text": "ok"},
                {"elementType": ""},
            )
        }

        content = build_request_body("post", fields)["content"]["post"]["zh_cn"]["content"]

        assert content == [[{"tag": "text", "text": "ok"}]]

    def test_unknown_type_falls_back_to_text(self) -> None:
        assert build_post_element({"elementType": "emoji", "text": "x"}) == {
            "tag": "text",
            "text": "x",
        }

    def test_at_defaults_to_all(self) -> None:
        assert build_post_element({"elementType": "at"}) == {"tag": "at", "user_id": "all"}

    def test_at_with_user_name(self) -> None:
        el = build_post_element({"elementType": "at", "userId": "ou_1", "userName": "Ana"})
        assert el == {"tag": "at", "user_id": "ou_1", "user_name": "Ana"}

    def test_img(self) -> None:
        el = build_post_element({"elementType": "img", "imageKey": "img_1"})
        assert el == {"tag": "img", "image_key": "img_1"}

    def test_indexed_paragraphs_match_list(self) -> None:
        elements = [
            {"elementType": "text", "text": "a"},
            {"elementType": "text", "text": "b"},
        ]
        as_list = {"postParagraphs": [{"elements": elements}]}
        as_dict = {"postParagraphs": {"0": {"elements": {"1": elements[1], "0": elements[0]}}}}

        assert build_request_body("post", as_list) == build_request_body("post", as_dict)


class TestSimpleCard:
    """Testes para cardMode=simple."""

    def test_empty_card_gets_placeholder(self) -> None:
        body = build_request_body("interactive", {"cardMode": "simple"})

        assert body["msg_type"] == "interactive"
        assert body["card"] == {
            "elements": [{"tag": "div", "text": {"tag": "plain_text", "content": " "}}]
        }

    def test_button_requires_text_and_url(self) -> None:
        card = build_request_body(
            "interactive",
            {"cardBodyMarkdown": "**oi**", "cardButtonText": "Abrir"},
        )["card"]

        assert card["elements"] == [
            {"tag": "div", "text": {"tag": "lark_md", "content": "**oi**"}}
        ]

    def test_full_simple_card(self) -> None:
        card = build_request_body(
            "interactive",
            {
                "cardHeaderTitle": "Deploy",
                "cardBodyMarkdown": "feito",
                "cardButtonText": "Ver",
                "cardButtonUrl": "https://example.com",
            },
        )["card"]

        assert card["header"] == {"title": {"tag": "plain_text", "content": "Deploy"}}
        assert len(card["elements"]) == 2
        action = card["elements"][1]
        assert action["tag"] == "action"
        assert action["actions"][0]["url"] == "https://example.com"
        assert action["actions"][0]["text"] == {"content": "Ver", "tag": "plain_text"}

    def test_unknown_mode_falls_back_to_simple(self) -> None:
        card = InteractivePayloadBuilder().build(FieldBag({"cardMode": "whatever"}))["card"]
        assert "elements" in card


class TestRawCard:
    """Testes para cardMode=raw."""

    def test_invalid_json_yields_empty_card(self) -> None:
        body = build_request_body("interactive", {"cardMode": "raw", "cardJson": "not json"})
        assert body == {"msg_type": "interactive", "card": {}}

    def test_valid_json_is_used_verbatim(self) -> None:
        raw = '{"schema": "2.0", "body": {"elements": []}}'
        card = build_request_body("interactive", {"cardMode": "raw", "cardJson": raw})["card"]
        assert card == {"schema": "2.0", "body": {"elements": []}}

    def test_non_object_json_yields_empty_card(self) -> None:
        assert build_raw_card("[1, 2]") == {}

    def test_mapping_is_accepted(self) -> None:
        assert build_raw_card({"elements": []}) == {"elements": []}

    @pytest.mark.parametrize(
        "raw",
        ["[" * 100000 + "]" * 100000, '{"a": NaN}'],
    )
    def test_unparseable_json_never_raises(self, raw: str) -> None:
        body = build_request_body("interactive", {"cardMode": "raw", "cardJson": raw})
        assert body == {"msg_type": "interactive", "card": {}}


def _form_card(**fields: Any) -> dict[str, Any]:
    return build_request_body("interactive", {"cardMode": "form", **fields})["card"]


class TestFormCard:
    """Testes para cardMode=form (cartão 2.0)."""

    def test_minimal_form_card(self) -> None:
        card = _form_card()

        assert card == {
            "schema": "2.0",
            "config": {"update_multi": True, "width_mode": "default", "enable_forward": True},
            "body": {
                "direction": "vertical",
                "elements": [{"tag": "markdown", "content": " "}],
            },
        }

    def test_config_summary_and_forward(self) -> None:
        card = _form_card(
            card2_config_summary="  resumo  ",
            card2_config_width_mode="fill",
            card2_config_enable_forward=False,
        )

        assert card["config"] == {
            "update_multi": True,
            "summary": {"content": "resumo"},
            "width_mode": "fill",
            "enable_forward": False,
        }

    def test_card_link_only_with_urls(self) -> None:
        card = _form_card(
            card2_card_link_url="https://example.com",
            card2_card_link_ios_url="https://ios.example.com",
        )

        assert card["card_link"] == {
            "url": "https://example.com",
            "ios_url": "https://ios.example.com",
        }

    def test_header_requires_title(self) -> None:
        card = _form_card(card2_header_subtitle="sub", card2_header_template="red")
        assert "header" not in card

    def test_header_omits_default_template(self) -> None:
        card = _form_card(card2_header_title="T", card2_header_template="default")
        assert card["header"] == {"title": {"tag": "plain_text", "content": "T"}}

    def test_header_with_subtitle_and_template(self) -> None:
        card = _form_card(
            card2_header_title="T",
            card2_header_subtitle="S",
            card2_header_template="green",
        )

        assert card["header"] == {
            "title": {"tag": "plain_text", "content": "T"},
            "subtitle": {"tag": "plain_text", "content": "S"},
            "template": "green",
        }

    def test_body_direction_and_padding(self) -> None:
        card = _form_card(
            card2_body_direction="horizontal",
            card2_body_padding="12px",
            card2_body_elements=[{"elementType": "hr"}],
        )

        assert card["body"] == {
            "direction": "horizontal",
            "padding": "12px",
            "elements": [{"tag": "hr"}],
        }

    def test_top_level_records_without_element_type_are_skipped(self) -> None:
        card = _form_card(
            card2_body_elements=[
                {"col_elType": "markdown", "content": "ignorado"},
                {"elementType": "markdown", "content": "ok"},
            ]
        )

        assert card["body"]["elements"] == [{"tag": "markdown", "content": "ok"}]


class TestCardElements:
    """Testes para elementos folha e containers do cartão 2.0."""

    def test_column_set_markdown_round_trip(self) -> None:
        elements = [
            {
                "elementType": "column_set",
                "columns": [
                    {
                        "column_width": "weighted",
                        "column_weight": "2",
                        "column_elements": [
                            {"col_elType": "markdown", "content": "**coluna**"}
                        ],
                    }
                ],
            }
        ]

        column_set = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert column_set["tag"] == "column_set"
        assert column_set["columns"][0]["elements"][0] == {
            "tag": "markdown",
            "content": "**coluna**",
        }
        assert column_set["columns"][0]["width"] == "weighted"
        assert column_set["columns"][0]["weight"] == 2

    def test_column_weight_zero_falls_back_to_one(self) -> None:
        elements = [{"elementType": "column_set", "columns": [{"column_weight": "0"}]}]
        column = _form_card(card2_body_elements=elements)["body"]["elements"][0]["columns"][0]
        assert column == {"tag": "column", "weight": 1, "elements": []}

    def test_indexed_columns_are_ordered(self) -> None:
        elements = [
            {
                "elementType": "column_set",
                "columns": {
                    "1": {"column_elements": [{"col_elType": "markdown", "content": "b"}]},
                    "0": {"column_elements": [{"col_elType": "markdown", "content": "a"}]},
                },
            }
        ]

        columns = _form_card(card2_body_elements=elements)["body"]["elements"][0]["columns"]

        assert [col["elements"][0]["content"] for col in columns] == ["a", "b"]

    def test_person_list_drops_blank_ids(self) -> None:
        elements = [
            {
                "elementType": "person_list",
                "person_list_ids": [{"id": "ou_1"}, {"id": ""}, {"id": "ou_2"}],
            }
        ]

        person_list = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert person_list == {
            "tag": "person_list",
            "persons": [{"id": "ou_1"}, {"id": "ou_2"}],
        }

    def test_person_list_options_and_icon_precedence(self) -> None:
        elements = [
            {
                "elementType": "person_list",
                "person_list_ids": {"0": {"id": " ou_9 "}},
                "person_list_size": "small",
                "person_list_show_avatar": True,
                "person_list_show_name": False,
                "person_list_lines": 0,
                "person_list_drop_invalid": True,
                "person_list_icon_token": "chat_outlined",
                "person_list_icon_color": "blue",
                "person_list_icon_img_key": "img_ignored",
            }
        ]

        person_list = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert person_list == {
            "tag": "person_list",
            "persons": [{"id": "ou_9"}],
            "size": "small",
            "show_avatar": True,
            "show_name": False,
            "drop_invalid_user_id": True,
            "icon": {"tag": "standard_icon", "token": "chat_outlined", "color": "blue"},
        }

    def test_person_list_custom_icon_and_lines(self) -> None:
        elements = [
            {
                "elementType": "person_list",
                "person_list_lines": "2",
                "person_list_icon_img_key": "img_1",
            }
        ]

        person_list = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert person_list["lines"] == 2
        assert person_list["icon"] == {"tag": "custom_icon", "img_key": "img_1"}

    def test_person(self) -> None:
        elements = [
            {
                "elementType": "person",
                "user_id": "ou_1",
                "person_size": "large",
                "person_show_avatar": True,
                "person_style": "capsule",
                "element_id": " p1 ",
            }
        ]

        person = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert person == {
            "element_id": "p1",
            "tag": "person",
            "user_id": "ou_1",
            "size": "large",
            "show_avatar": True,
            "style": "capsule",
        }

    def test_button_and_img(self) -> None:
        elements = [
            {"elementType": "button", "button_text": "Ir", "button_url": "https://x.io"},
            {"elementType": "img", "img_key": "img_2"},
        ]

        built = _form_card(card2_body_elements=elements)["body"]["elements"]

        assert built == [
            {
                "tag": "button",
                "text": {"tag": "plain_text", "content": "Ir"},
                "url": "https://x.io",
                "type": "default",
            },
            {"tag": "img", "img_key": "img_2"},
        ]

    def test_unknown_element_type_keeps_only_element_id(self) -> None:
        elements = [{"elementType": "chart", "element_id": "c1"}]
        built = _form_card(card2_body_elements=elements)["body"]["elements"]
        assert built == [{"element_id": "c1"}]

    def test_interactive_container_open_url_behavior(self) -> None:
        elements = [
            {
                "elementType": "interactive_container",
                "has_border": True,
                "action_type": "open_url",
                "action_url": "https://example.com",
                "action_ios_url": "https://ios.example.com",
                "container_elements": [{"c_elType": "markdown", "content": "clique"}],
            }
        ]

        container = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert container["tag"] == "interactive_container"
        assert container["has_border"] is True
        assert container["behaviors"] == [
            {
                "type": "open_url",
                "default_url": "https://example.com",
                "pc_url": "https://example.com",
                "ios_url": "https://ios.example.com",
                "android_url": "https://example.com",
            }
        ]
        assert container["elements"] == [{"tag": "markdown", "content": "clique"}]

    @pytest.mark.parametrize(
        ("raw_value", "expected"),
        [
            ('{"action": "ack"}', {"action": "ack"}),
            ("not json", {}),
            ("[" * 100000 + "]" * 100000, {}),
            ('{"n": NaN}', {}),
            ({"ja": "objeto"}, {"ja": "objeto"}),
        ],
    )
    def test_interactive_container_callback_behavior(
        self, raw_value: Any, expected: dict[str, Any]
    ) -> None:
        elements = [
            {
                "elementType": "interactive_container",
                "action_type": "callback",
                "callback_value": raw_value,
            }
        ]

        container = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert container["behaviors"] == [{"type": "callback", "value": expected}]

    def test_collapsible_panel(self) -> None:
        elements = [
            {
                "elementType": "collapsible_panel",
                "panel_expanded": False,
                "panel_header_title": "Detalhes",
                "panel_header_background_color": "grey",
                "panel_border_color": "grey",
                "panel_border_corner_radius": "5px",
                "container_elements": [{"c_elType": "hr"}],
            }
        ]

        panel = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert panel == {
            "tag": "collapsible_panel",
            "expanded": False,
            "header": {
                "title": {"tag": "plain_text", "content": "Detalhes"},
                "background_color": "grey",
            },
            "border": {"color": "grey", "corner_radius": "5px"},
            "elements": [{"tag": "hr"}],
        }

    def test_form_buttons_get_action_type_and_name(self) -> None:
        elements = [
            {
                "elementType": "form",
                "form_name": "f1",
                "container_elements": [
                    {
                        "c_elType": "button",
                        "button_text": "Enviar",
                        "form_action_type": "submit",
                        "form_button_name": " btn_submit ",
                    },
                    {"c_elType": "markdown", "content": "texto"},
                ],
            }
        ]

        form = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        assert form["tag"] == "form"
        assert form["name"] == "f1"
        assert form["elements"][0]["form_action_type"] == "submit"
        assert form["elements"][0]["name"] == "btn_submit"
        assert form["elements"][1] == {"tag": "markdown", "content": "texto"}

    def test_nested_containers(self) -> None:
        elements = [
            {
                "elementType": "collapsible_panel",
                "container_elements": [
                    {
                        "elementType": "column_set",
                        "columns": [
                            {"column_elements": [{"col_elType": "markdown", "content": "fundo"}]}
                        ],
                    }
                ],
            }
        ]

        panel = _form_card(card2_body_elements=elements)["body"]["elements"][0]

        inner = panel["elements"][0]
        assert inner["tag"] == "column_set"
        assert inner["columns"][0]["elements"] == [{"tag": "markdown", "content": "fundo"}]

    def test_discriminator_precedence(self) -> None:
        elements = [
            {
                "elementType": "column_set",
                "columns": [
                    {
                        "column_elements": [
                            {"col_elType": "hr", "c_elType": "markdown", "content": "x"}
                        ]
                    }
                ],
            }
        ]

        column = _form_card(card2_body_elements=elements)["body"]["elements"][0]["columns"][0]

        assert column["elements"] == [{"tag": "hr"}]


class TestFactory:
    """Testes para factory e Field Bag."""

    def test_get_payload_builder(self) -> None:
        assert isinstance(get_payload_builder("text"), TextPayloadBuilder)
        assert get_payload_builder("sticker") is None

    def test_unknown_message_type_yields_empty_document(self) -> None:
        assert build_request_body("sticker", {"text": "x"}) == {}

    def test_field_bag_defaults(self) -> None:
        bag = FieldBag({"text": None})
        assert bag["text"] == ""
        assert bag["cardMode"] == "simple"
        assert bag["card2_body_elements"] == []
        assert bag.provided("text") is False

    def test_field_bag_default_lists_are_copies(self) -> None:
        bag = FieldBag()
        bag["postParagraphs"].append("x")
        assert FieldBag()["postParagraphs"] == []

    def test_field_bag_unknown_missing_key(self) -> None:
        with pytest.raises(KeyError):
            FieldBag()["nao_existe"]

    def test_field_bag_keeps_unknown_keys(self) -> None:
        bag = FieldBag({"extra": 1})
        assert bag["extra"] == 1
        assert set(bag) == set(FIELD_SCHEMA) | {"extra"}
        assert len(bag) == len(FIELD_SCHEMA) + 1
