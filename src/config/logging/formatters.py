"""Formatter JSON dos logs do serviço.

Todo registro sai como um objeto JSON com os campos de REQUIRED_LOG_FIELDS,
renomeados conforme FIELD_RENAME_MAP, mais os campos passados via `extra`.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter padrão.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.connectors.feishu.http_client",
         "message": "feishu_webhook_sent", "correlation_id": "batch-1", "service": "feishu_custom_bot"}
    """
    format_string = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
