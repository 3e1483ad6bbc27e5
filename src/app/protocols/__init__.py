"""Protocolos e contratos do core da aplicação."""

from .dispatch_observer import DispatchObserverProtocol
from .push_dispatcher import PushDispatcherProtocol

__all__ = [
    "DispatchObserverProtocol",
    "PushDispatcherProtocol",
]
