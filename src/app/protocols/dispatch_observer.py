"""Protocolos de observação de envios de push."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.push import DispatchContext, DispatchResult, PushNotification


class DispatchObserverProtocol(Protocol):
    """Recebe os resultados agrupados por sucesso/falha após cada envio."""

    def on_dispatched(
        self,
        context: DispatchContext,
        notification: PushNotification,
        results: Sequence[DispatchResult],
    ) -> None: ...

    def on_error(
        self,
        context: DispatchContext,
        notification: PushNotification,
        results: Sequence[DispatchResult],
    ) -> None: ...
