"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir o corpo do webhook."""

    def __call__(
        self,
        message_type: str,
        fields: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]: ...
