"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto (observers, políticas).
"""

from app.services.push_delivery_log import PushDeliveryLogObserver

__all__ = [
    "PushDeliveryLogObserver",
]
