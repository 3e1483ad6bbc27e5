"""Observer que registra o resultado de envios de push (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.push import DispatchContext, DispatchResult, PushNotification

logger = logging.getLogger(__name__)


class PushDeliveryLogObserver:
    """Implementa DispatchObserverProtocol logando sucessos e falhas.

    Tokens de device e conteúdo da notificação nunca são logados.
    """

    def on_dispatched(
        self,
        context: DispatchContext,
        notification: PushNotification,
        results: Sequence[DispatchResult],
    ) -> None:
        logger.debug(
            "push_dispatched",
            extra={
                "channel_provider_id": context.channel_provider_id,
                "count": len(results),
                "resource_ids": [result.resource_id for result in results],
                "correlation_id": get_correlation_id(),
            },
        )

    def on_error(
        self,
        context: DispatchContext,
        notification: PushNotification,
        results: Sequence[DispatchResult],
    ) -> None:
        error_types = sorted(
            {type(result.exception).__name__ for result in results if result.exception is not None}
        )
        logger.warning(
            "push_dispatch_failed",
            extra={
                "channel_provider_id": context.channel_provider_id,
                "count": len(results),
                "error_types": error_types,
                "correlation_id": get_correlation_id(),
            },
        )
