"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging e conecta as implementações concretas
(api/) aos protocolos consumidos pelos use cases (app/).

Uso:
    from app.bootstrap import initialize_app, get_send_webhook_batch_use_case

    initialize_app()
    use_case = get_send_webhook_batch_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_feishu_settings

if TYPE_CHECKING:
    from app.use_cases.feishu import SendWebhookBatchUseCase

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com service e correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido; em `development` apenas alerta.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"feishu: {error}" for error in get_feishu_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_send_webhook_batch_use_case() -> SendWebhookBatchUseCase:
    """Use case de envio em lote com as implementações concretas (singleton)."""
    from api.connectors.feishu import create_feishu_http_client, sign_payload
    from api.payload_builders.feishu import build_request_body
    from api.validators.feishu import FeishuItemValidator
    from app.use_cases.feishu import SendWebhookBatchUseCase

    settings = get_feishu_settings()
    return SendWebhookBatchUseCase(
        validator=FeishuItemValidator(),
        builder=build_request_body,
        signer=sign_payload,
        sender=create_feishu_http_client(settings),
        settings=settings,
    )
