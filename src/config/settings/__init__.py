"""Agregador de settings do serviço de push.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.firebase import (
    DEFAULT_APP_NAME,
    FirebaseSettings,
    get_firebase_settings,
)

__all__ = [
    # Constants
    "DEFAULT_APP_NAME",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "FirebaseSettings",
    "get_base_settings",
    "get_firebase_settings",
]
