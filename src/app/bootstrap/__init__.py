"""Bootstrap do serviço de push: composition root.

Uso:
    from app.bootstrap import initialize_app, get_push_dispatcher

    initialize_app()
    dispatcher = get_push_dispatcher()
    results = await dispatcher.dispatch(notification, context)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.bootstrap.push_factory import create_push_dispatcher
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_firebase_settings

if TYPE_CHECKING:
    from api.connectors.firebase import FirebasePushDispatcher

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON e valida settings. Chamar uma vez no startup."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def initialize_test_app() -> None:
    """Logging em DEBUG com formatter texto, para testes."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
        json_output=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    base = get_base_settings()
    environment = base.environment
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"firebase: {error}" for error in get_firebase_settings().validate_settings())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_push_dispatcher() -> FirebasePushDispatcher:
    """Obtém dispatcher configurado pelo ambiente (singleton)."""
    return create_push_dispatcher()


__all__ = [
    "create_push_dispatcher",
    "get_push_dispatcher",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
