"""Conector Feishu - adapter de borda para o webhook do bot customizado.

Este módulo é o único ponto de IO para o canal Feishu.
Responsabilidades:
- Assinatura HMAC dos requests (timestamp + sign)
- HTTP client para o webhook
- Parsing de erros de aplicação (`code`/`msg`)
"""

from .api_errors import FeishuApiError, parse_feishu_error
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import FeishuHttpClient, create_feishu_http_client
from .signature import gen_sign, sign_payload

__all__ = [
    "FeishuApiError",
    "FeishuHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "create_feishu_http_client",
    "gen_sign",
    "parse_feishu_error",
    "sign_payload",
]
