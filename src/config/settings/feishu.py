"""Settings específicas do canal Feishu (bot customizado via webhook)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

WEBHOOK_URL_PREFIXES: tuple[str, ...] = ("https://", "http://")


@dataclass(frozen=True)
class FeishuSettings:
    """Configurações do canal Feishu.

    Attributes:
        webhook_url: URL padrão do hook (usada quando o item não informa)
        sign_secret: Segredo de assinatura padrão (vazio = sem assinatura)
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de novas tentativas em 429/5xx/erro de conexão
        continue_on_fail: Registrar erro por item e seguir o lote
    """

    # Credenciais (carregadas de env)
    webhook_url: str = ""
    sign_secret: str = ""

    # Timeouts e retries
    request_timeout_seconds: float = 10.0
    max_retries: int = 2

    # Lote
    continue_on_fail: bool = False

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Feishu.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.webhook_url and not self.webhook_url.startswith(WEBHOOK_URL_PREFIXES):
            errors.append("FEISHU_WEBHOOK_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("FEISHU_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("FEISHU_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> FeishuSettings:
    """Carrega FeishuSettings a partir de variáveis de ambiente."""
    return FeishuSettings(
        webhook_url=os.getenv("FEISHU_WEBHOOK_URL", ""),
        sign_secret=os.getenv("FEISHU_SIGN_SECRET", ""),
        request_timeout_seconds=float(os.getenv("FEISHU_REQUEST_TIMEOUT_SECONDS", "10")),
        max_retries=int(os.getenv("FEISHU_MAX_RETRIES", "2")),
        continue_on_fail=os.getenv("FEISHU_CONTINUE_ON_FAIL", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_feishu_settings() -> FeishuSettings:
    """Retorna instância cacheada de FeishuSettings."""
    return _load_from_env()
