"""Factory de wiring do dispatcher Firebase (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.firebase import FirebaseOptions, FirebasePushDispatcher
from app.services.push_delivery_log import PushDeliveryLogObserver
from config.settings import get_firebase_settings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.protocols.dispatch_observer import DispatchObserverProtocol
    from config.settings import FirebaseSettings


def create_push_dispatcher(
    settings: FirebaseSettings | None = None,
    observers: Iterable[DispatchObserverProtocol] = (),
) -> FirebasePushDispatcher:
    """Cria dispatcher com opções derivadas das settings.

    Args:
        settings: FirebaseSettings opcional. Se None, carrega do ambiente.
        observers: Observers extras (o log de entrega é sempre incluído).
    """
    firebase = settings or get_firebase_settings()
    return FirebasePushDispatcher(
        FirebaseOptions.from_settings(firebase),
        observers=(PushDeliveryLogObserver(), *observers),
    )
