"""Registro de apps firebase_admin por nome (singleton por processo).

Um app é criado no máximo uma vez por nome. Se o host já inicializou um app
com o mesmo nome (fora deste connector), ele é reutilizado.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

import firebase_admin

from api.connectors.firebase.options import to_app_options

if TYPE_CHECKING:
    from api.connectors.firebase.options import FirebaseOptions

logger = logging.getLogger(__name__)

_apps: dict[str, firebase_admin.App] = {}
_lock = threading.Lock()


def get_or_create_app(options: FirebaseOptions) -> firebase_admin.App:
    """Retorna o app cacheado para `options.app_name`, criando se necessário.

    Raises:
        ValueError: Se options for None.
        FirebaseConfigurationError: Se a credencial for inválida.
    """
    if options is None:
        raise ValueError("options é obrigatório")

    app = _apps.get(options.app_name)
    if app is not None:
        return app

    with _lock:
        app = _apps.get(options.app_name)
        if app is None:
            app = _existing_app(options.app_name) or _create_app(options)
            _apps[options.app_name] = app
    return app


def clear_app_cache() -> None:
    """Esquece os apps cacheados (não apaga apps do firebase_admin)."""
    with _lock:
        _apps.clear()


def _existing_app(app_name: str) -> firebase_admin.App | None:
    try:
        app = firebase_admin.get_app(app_name)
    except ValueError:
        return None
    logger.info("firebase_app_reused", extra={"app_name": app_name})
    return app


def _create_app(options: FirebaseOptions) -> firebase_admin.App:
    credential, app_options = to_app_options(options)
    app = firebase_admin.initialize_app(credential, app_options or None, name=options.app_name)
    logger.info(
        "firebase_app_created",
        extra={"app_name": options.app_name, "project_id": app_options.get("projectId")},
    )
    return app


__all__ = ["clear_app_cache", "get_or_create_app"]
