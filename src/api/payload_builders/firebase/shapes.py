"""Classificação de valores de formato desconhecido para o payload FCM.

Todo valor recebido no content model cai em uma das variantes de `ValueKind`:
- ABSENT: None
- SCALAR: possui texto canônico independente de locale (str, número, data, UUID)
- KEYED_CONTAINER: expõe pares chave/valor diretamente (mapping-like)
- STRUCTURED_RECORD: campos nomeados descobertos por introspecção
- UNSUPPORTED: sem campos introspectáveis (listas, bytes, etc.)

A ordem das checagens importa: escalar antes de container, container antes
de record. Um mesmo valor pode satisfazer mais de uma variante.
"""

from __future__ import annotations

import dataclasses
import numbers
import uuid
from collections.abc import Iterator, Mapping, MutableMapping
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum, StrEnum
from typing import Any

from pydantic import BaseModel


class ValueKind(StrEnum):
    """Variantes possíveis de um valor do content model."""

    ABSENT = "absent"
    SCALAR = "scalar"
    KEYED_CONTAINER = "keyed_container"
    STRUCTURED_RECORD = "structured_record"
    UNSUPPORTED = "unsupported"


Entry = tuple[str, Any]


def to_scalar_text(value: Any) -> str | None:
    """Converte valor escalar para texto invariante.

    Args:
        value: Valor arbitrário.

    Returns:
        Texto canônico ou None se o valor não for escalar.
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        inner = to_scalar_text(value.value)
        return inner if inner is not None else value.name
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, numbers.Number):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return str(value)
    if isinstance(value, uuid.UUID):
        return str(value)
    return None


def iter_keyed_entries(value: Any) -> Iterator[Entry] | None:
    """Retorna iterador de pares se o valor for dictionary-like.

    Ordem de checagem (primeiro match vence):
    1. Mapping somente leitura (ex: MappingProxyType)
    2. MutableMapping (ex: dict)
    3. Protocolo keys() + __getitem__ (ex: sqlite3.Row)
    4. Interface de mapping sem registro no ABC: keys(), values() e items()

    Records declarados (pydantic, dataclass, named tuple) nunca passam por
    3 e 4, mesmo que definam métodos com esses nomes.

    Returns:
        Iterador de (nome, valor) ou None se não for container.
    """
    if not _is_keyed_container(value):
        return None
    if isinstance(value, Mapping) and not isinstance(value, MutableMapping):
        return _stringify_keys(value.items())
    if isinstance(value, MutableMapping):
        return _stringify_keys(value.items())
    if _has_keys_protocol(value):
        return _stringify_keys((key, value[key]) for key in value.keys())
    return _stringify_keys(value.items())


def iter_record_fields(value: Any) -> Iterator[Entry]:
    """Itera campos públicos de um record via introspecção.

    Valores são lidos via getattr; erros de acesso propagam ao chamador.
    """
    for name in _record_field_names(value):
        yield name, getattr(value, name)


def classify(value: Any) -> ValueKind:
    """Classifica o valor conforme a ordem de prioridade das variantes."""
    if value is None:
        return ValueKind.ABSENT
    if to_scalar_text(value) is not None:
        return ValueKind.SCALAR
    if _is_keyed_container(value):
        return ValueKind.KEYED_CONTAINER
    if _record_field_names(value):
        return ValueKind.STRUCTURED_RECORD
    return ValueKind.UNSUPPORTED


def _is_keyed_container(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    if isinstance(value, type) or _is_declared_record(value):
        return False
    return _has_keys_protocol(value) or _has_mapping_methods(value)


def _is_declared_record(value: Any) -> bool:
    return isinstance(value, (BaseModel, tuple)) or dataclasses.is_dataclass(value)


def _has_keys_protocol(value: Any) -> bool:
    return callable(getattr(value, "keys", None)) and hasattr(value, "__getitem__")


def _has_mapping_methods(value: Any) -> bool:
    return all(callable(getattr(value, method, None)) for method in ("keys", "values", "items"))


def _stringify_keys(pairs: Any) -> Iterator[Entry]:
    for key, item in pairs:
        if key is None:
            continue
        yield (key if isinstance(key, str) else str(key)), item


def _record_field_names(value: Any) -> list[str]:
    """Lista nomes de campos públicos do record (sem acessar valores)."""
    if isinstance(value, BaseModel):
        model_type = type(value)
        names = list(model_type.model_fields)
        names.extend(model_type.model_computed_fields)
        return _public(names)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _public(field.name for field in dataclasses.fields(value))

    if isinstance(value, tuple):
        # Apenas named tuples possuem campos nomeados
        return _public(getattr(value, "_fields", ()))

    if isinstance(value, type) or callable(value):
        return []

    names: list[str] = []
    instance_attrs = getattr(value, "__dict__", None)
    if isinstance(instance_attrs, dict):
        names.extend(instance_attrs)
    else:
        names.extend(
            slot for slot in _declared_slots(type(value)) if hasattr(value, slot)
        )

    for klass in type(value).__mro__:
        for attr_name, attr in vars(klass).items():
            if isinstance(attr, property) and attr_name not in names:
                names.append(attr_name)

    return _public(names)


def _declared_slots(klass: type) -> list[str]:
    slots: list[str] = []
    for base in klass.__mro__:
        declared = base.__dict__.get("__slots__", ())
        if isinstance(declared, str):
            declared = (declared,)
        slots.extend(name for name in declared if name not in slots)
    return slots


def _public(names: Any) -> list[str]:
    return [name for name in names if isinstance(name, str) and not name.startswith("_")]


__all__ = [
    "Entry",
    "ValueKind",
    "classify",
    "iter_keyed_entries",
    "iter_record_fields",
    "to_scalar_text",
]
