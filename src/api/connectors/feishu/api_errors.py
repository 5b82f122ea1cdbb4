"""Erros e helpers de parsing para respostas do webhook Feishu."""

from __future__ import annotations

import json
from typing import Any


class FeishuApiError(Exception):
    """Falha de aplicação retornada pelo Feishu (`code` != 0)."""

    def __init__(self, code: Any, msg: str) -> None:
        super().__init__(f"Feishu API error (code: {code}): {msg}")
        self.code = code
        self.msg = msg


def parse_feishu_error(response_data: Any) -> FeishuApiError | None:
    """Extrai erro de aplicação do response do webhook.

    Sucesso: `code` ausente ou igual a 0. A mensagem usa `msg`, depois
    `StatusMessage` e, por último, o response inteiro serializado.

    Args:
        response_data: JSON do response

    Returns:
        FeishuApiError se houver erro, None se sucesso
    """
    if not isinstance(response_data, dict):
        return None

    code = response_data.get("code")
    if code is None or code == 0:
        return None

    message = (
        response_data.get("msg")
        or response_data.get("StatusMessage")
        or json.dumps(response_data, ensure_ascii=False, separators=(",", ":"))
    )
    return FeishuApiError(code=code, msg=str(message))
