"""Formatters de logging do serviço de push.

JSON (produção) com campos obrigatórios:
- correlation_id
- service
- asctime
- level (levelname)
- logger (name)
- message

Texto simples (testes/desenvolvimento) com os mesmos campos em linha.
Nunca registrar tokens de device ou conteúdo do payload de dados.
"""

from __future__ import annotations

import logging

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

_PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(service)s:%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "INFO",
            "logger": "api.connectors.firebase.dispatcher",
            "message": "firebase_push_dispatched",
            "correlation_id": "abc-123",
            "service": "firebase_push",
            "success_count": 2
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)


def create_plain_formatter() -> logging.Formatter:
    """Cria formatter texto para leitura humana (sem campos de extra)."""
    return logging.Formatter(_PLAIN_FORMAT)
