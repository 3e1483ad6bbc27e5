"""Normalização do content model para o campo `data` de mensagens FCM.

O FCM só aceita pares string/string no payload de dados. Este módulo achata
qualquer valor (escalar, mapping ou record, aninhado) em um dict de um nível
com chaves em notação de caminho (`Data.Guid`).

Regras:
- Chaves reservadas (trx, pid, att, lnk) são removidas apenas na raiz
- Valores None nunca são emitidos
- Profundidade máxima de MAX_FLATTEN_DEPTH níveis; subárvores além disso
  são descartadas sem emissão parcial
- Qualquer falha na travessia degrada o resultado para None (best-effort)

Uso:
    from api.payload_builders.firebase import normalize

    data = normalize(context.content_model)  # dict[str, str] | None
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.firebase.shapes import (
    Entry,
    ValueKind,
    classify,
    iter_keyed_entries,
    iter_record_fields,
    to_scalar_text,
)
from config.logging import log_fallback

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_COMPONENT = "firebase_data_normalizer"

# Chaves de controle do template que não devem vazar para o device
EXCLUDED_ROOT_KEYS: frozenset[str] = frozenset({"trx", "pid", "att", "lnk"})

MAX_FLATTEN_DEPTH = 8


def normalize(
    content: Any,
    *,
    excluded_keys: frozenset[str] = EXCLUDED_ROOT_KEYS,
    max_depth: int = MAX_FLATTEN_DEPTH,
) -> dict[str, str] | None:
    """Achata o content model em um dict string/string.

    Nunca levanta exceção: falhas de introspecção ou formatos inesperados
    resultam em None, assim como um resultado vazio.

    Args:
        content: Valor arbitrário (mapping, record ou None).
        excluded_keys: Chaves ignoradas na raiz (comparação case-insensitive).
        max_depth: Profundidade máxima de aninhamento.

    Returns:
        Dict achatado ou None se não houver dados utilizáveis.
    """
    if content is None:
        return None

    excluded = frozenset(key.casefold() for key in excluded_keys)
    try:
        data: dict[str, str] = {}
        for name, value in _children(content, classify(content)):
            if _is_blank(name):
                continue
            _append(data, name, value, depth=0, is_root=True, excluded=excluded, max_depth=max_depth)
    except Exception as exc:
        log_fallback(logger, _COMPONENT, reason=type(exc).__name__)
        return None

    return data or None


def _append(
    data: dict[str, str],
    name: str,
    value: Any,
    *,
    depth: int,
    is_root: bool,
    excluded: frozenset[str],
    max_depth: int,
) -> None:
    if _is_blank(name) or value is None:
        return

    if is_root and name.casefold() in excluded:
        return

    kind = classify(value)
    if kind is ValueKind.SCALAR:
        data[name] = to_scalar_text(value)
        return

    if depth >= max_depth:
        return

    for child_name, child_value in _children(value, kind):
        if _is_blank(child_name):
            continue
        _append(
            data,
            f"{name}.{child_name}",
            child_value,
            depth=depth + 1,
            is_root=False,
            excluded=excluded,
            max_depth=max_depth,
        )


def _children(value: Any, kind: ValueKind) -> Iterable[Entry]:
    if kind is ValueKind.KEYED_CONTAINER:
        return iter_keyed_entries(value) or ()
    if kind is ValueKind.STRUCTURED_RECORD:
        return iter_record_fields(value)
    return ()


def _is_blank(name: str | None) -> bool:
    return name is None or not name.strip()


__all__ = ["EXCLUDED_ROOT_KEYS", "MAX_FLATTEN_DEPTH", "normalize"]
