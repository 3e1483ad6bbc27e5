"""Logging estruturado do serviço de push.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="firebase_push")
    logger = get_logger(__name__)
    logger.info("firebase_push_dispatched", extra={"success_count": 3})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Tokens de device e payload de dados nunca são logados.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_plain_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "create_plain_formatter",
    "get_logger",
    "log_fallback",
]
