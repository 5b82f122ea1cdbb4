"""Assinatura HMAC-SHA256 exigida pelo webhook com verificação de assinatura.

O Feishu usa `"{timestamp}\\n{secret}"` como CHAVE do HMAC sobre mensagem
vazia e compara o resultado em base64 com o campo `sign` do corpo.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
from typing import Any


def gen_sign(secret: str, timestamp: int) -> str:
    """Calcula a assinatura para o par (secret, timestamp).

    Args:
        secret: Segredo de assinatura configurado no bot
        timestamp: Unix timestamp em segundos

    Returns:
        Digest HMAC-SHA256 (32 bytes) codificado em base64
    """
    string_to_sign = f"{timestamp}\n{secret}"
    digest = hmac.new(string_to_sign.encode("utf-8"), b"", hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


def current_timestamp() -> int:
    """Unix timestamp atual em segundos."""
    return int(time.time())


def sign_payload(
    payload: dict[str, Any],
    secret: str,
    timestamp: int | None = None,
) -> dict[str, Any]:
    """Retorna novo payload com `timestamp` e `sign` no topo.

    O timestamp é lido do relógio no momento da chamada quando não
    informado; nunca reutilizar entre itens.

    Args:
        payload: Documento construído pelo builder
        secret: Segredo de assinatura
        timestamp: Timestamp explícito (testes/replay)

    Returns:
        Cópia do payload com os campos de assinatura
    """
    ts = current_timestamp() if timestamp is None else timestamp
    return {
        "timestamp": str(ts),
        "sign": gen_sign(secret, ts),
        **payload,
    }
