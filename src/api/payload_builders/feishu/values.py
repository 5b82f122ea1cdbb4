"""Helpers de normalização de valores usados pelos builders Feishu.

Os valores chegam do host como tipos soltos (string, número, bool, lista ou
dict indexado). Estes helpers concentram as conversões para que os builders
leiam apenas dados já canonicalizados.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from config.logging import log_fallback

logger = logging.getLogger(__name__)

_MISSING = object()


def to_ordered_list(value: Any) -> list[Any]:
    """Canonicaliza uma coleção ordenada de registros.

    Aceita lista/tupla (mantida como está) ou dict com chaves numéricas em
    string ("0", "1", ...), ordenado numericamente. Qualquer outro valor vira
    lista vazia.

    Args:
        value: Lista ou mapping indexado

    Returns:
        Lista na ordem original de autoria
    """
    if value is None:
        return []
    if isinstance(value, list | tuple):
        return list(value)
    if isinstance(value, Mapping):
        return [value[key] for key in sorted(value, key=_index_key)]
    return []


def _index_key(key: Any) -> float:
    try:
        return float(key)
    except (TypeError, ValueError):
        return math.inf


def trimmed(value: Any) -> str:
    """Retorna str(value).strip(), ou string vazia para None."""
    if value is None:
        return ""
    return str(value).strip()


def to_number(value: Any) -> float | int | None:
    """Converte valor para número; None se não for numérico."""
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return None if isinstance(value, float) and math.isnan(value) else value
    try:
        number = float(str(value).strip() or "0")
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return int(number) if number.is_integer() else number


def parse_json_or_empty(raw: Any, component: str = "json_field") -> Any:
    """Interpreta string JSON; retorna {} se o parse falhar.

    Valores que não são string são devolvidos sem alteração. Aninhamento
    profundo demais e as constantes NaN/Infinity também contam como falha.
    O fallback é registrado via log_fallback (sem o conteúdo do campo).

    Args:
        raw: String JSON ou valor já estruturado
        component: Nome do campo para o log de fallback
    """
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, RecursionError):
        log_fallback(logger, component, reason="invalid_json")
        return {}


def _reject_constant(name: str) -> Any:
    # NaN/Infinity não são JSON válido
    raise ValueError(f"invalid JSON constant: {name}")


def _finite_float(literal: str) -> float:
    # "1e400" estoura para inf
    number = float(literal)
    if not math.isfinite(number):
        raise ValueError(f"non-finite JSON number: {literal}")
    return number


def put_if(
    target: dict[str, Any],
    key: str,
    value: Any,
    *,
    when: bool | None = None,
) -> None:
    """Inclui `key` em `target` somente se o valor estiver preenchido.

    Por padrão "preenchido" segue truthiness (string vazia, 0, False e None
    são omitidos). `when` sobrescreve a condição.
    """
    include = bool(value) if when is None else when
    if include:
        target[key] = value


def pick(record: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Lê `key` tratando None como ausente."""
    value = record.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    return value
