"""Agregador de settings do serviço.

Re-exporta as settings de cada módulo; um arquivo por domínio.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.feishu import (
    FeishuSettings,
    get_feishu_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "FeishuSettings",
    "get_base_settings",
    "get_feishu_settings",
]
