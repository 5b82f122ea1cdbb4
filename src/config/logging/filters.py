"""Filters de logging: contexto (service/correlation_id) e mascaramento.

- CorrelationIdFilter injeta `service` e `correlation_id` em cada record.
- SecretRedactionFilter mascara campos `extra` que carregam segredo de
  assinatura, `sign` ou URL de webhook (o token do hook faz parte da URL).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "***"

SENSITIVE_FIELDS = frozenset({"sign", "sign_secret", "secret", "webhook_url"})


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Sem getter, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; correlation_id explícito via `extra` é preservado."""
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Substitui valores de SENSITIVE_FIELDS por REDACTED."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field_name in SENSITIVE_FIELDS:
            if getattr(record, field_name, None):
                setattr(record, field_name, REDACTED)
        return True
