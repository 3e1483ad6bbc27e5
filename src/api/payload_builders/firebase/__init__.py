"""Builders de payload para Firebase Cloud Messaging.

- data: achatamento do content model em pares string/string
- shapes: classificação de valores (escalar, container, record)
- message: montagem de firebase_admin.messaging.Message
"""

from .data import EXCLUDED_ROOT_KEYS, MAX_FLATTEN_DEPTH, normalize
from .message import build_message
from .shapes import ValueKind, classify, to_scalar_text

__all__ = [
    "EXCLUDED_ROOT_KEYS",
    "MAX_FLATTEN_DEPTH",
    "ValueKind",
    "build_message",
    "classify",
    "normalize",
    "to_scalar_text",
]
