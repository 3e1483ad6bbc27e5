"""Protocolos de envio de push notifications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.push import DispatchContext, DispatchResult, PushNotification


class PushDispatcherProtocol(Protocol):
    """Contrato mínimo para enviar uma push notification a seus destinatários."""

    async def dispatch(
        self,
        notification: PushNotification,
        context: DispatchContext,
    ) -> list[DispatchResult]: ...
