"""Cliente HTTP especializado para o webhook do bot customizado Feishu.

Estende HttpClient genérico com comportamentos específicos:
- POST JSON com `Content-Type: application/json`
- Validação do response (JSON obrigatório)
- Tratamento de erros de aplicação (`code` != 0 → FeishuApiError)
- Logging sem token do hook, assinatura ou conteúdo da mensagem
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.feishu.api_errors import FeishuApiError, parse_feishu_error
from api.connectors.feishu.api_logging import log_api_error, log_success
from api.connectors.feishu.http_base import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from config.settings import FeishuSettings

logger: logging.Logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class FeishuHttpClient(HttpClient):
    """Cliente HTTP para entrega de mensagens no webhook Feishu."""

    async def send_webhook(
        self,
        webhook_url: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Envia documento ao webhook.

        Args:
            webhook_url: URL completa do hook
            payload: Documento (já assinado, se aplicável)

        Returns:
            Response JSON do Feishu

        Raises:
            ValueError: Se webhook_url está vazio
            HttpError: Falha de transporte ou response inválido
            FeishuApiError: Response com `code` diferente de 0
        """
        if not webhook_url or not webhook_url.strip():
            raise ValueError("webhook_url é obrigatório para envio de mensagens")

        response = await self.post(webhook_url, json=payload, headers=JSON_HEADERS)
        return self._process_response(response, webhook_url)

    def _process_response(
        self,
        response: httpx.Response,
        webhook_url: str,
    ) -> dict[str, Any]:
        """Processa response do webhook."""
        try:
            response_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(
                "feishu_invalid_json_response",
                extra={"status_code": response.status_code},
            )
            raise HttpError(
                "invalid_json_response",
                status_code=response.status_code,
            ) from e

        api_error = parse_feishu_error(response_data)
        if api_error:
            self._handle_api_error(api_error, webhook_url)

        log_success(webhook_url, response.status_code)
        return response_data

    def _handle_api_error(self, api_error: FeishuApiError, webhook_url: str) -> None:
        log_api_error(api_error, webhook_url)
        raise api_error


def create_feishu_http_client(
    settings: FeishuSettings | None = None,
) -> FeishuHttpClient:
    """Factory para criar cliente Feishu com config padrão.

    Args:
        settings: FeishuSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado.
    """
    # Import local para evitar dependência circular
    from config.settings import get_feishu_settings

    feishu = settings or get_feishu_settings()
    config = HttpClientConfig(
        timeout_seconds=feishu.request_timeout_seconds,
        max_retries=feishu.max_retries,
    )
    return FeishuHttpClient(config=config)
