"""Dispatcher de push notifications via Firebase Cloud Messaging.

Fluxo de `dispatch`:
1. Normaliza o content model uma vez (payload `data` compartilhado)
2. Monta uma mensagem por destinatário (device token ou tópico)
3. Envia em lotes de até MAX_BATCH_SIZE via `messaging.send_each`
4. Traduz cada SendResponse em DispatchResult (na ordem dos destinatários)
5. Notifica observers com sucessos e falhas

O SDK é síncrono; o envio roda em thread via asyncio.to_thread.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from firebase_admin import messaging
from firebase_admin.exceptions import FirebaseError

from api.connectors.firebase.app_registry import get_or_create_app
from api.connectors.firebase.results import failed_result, from_send_response
from api.payload_builders.firebase import build_message, normalize
from app.observability import (
    correlation_scope,
    get_correlation_id,
    record_dispatch_outcome,
    record_latency,
)
from app.protocols.push_dispatcher import PushDispatcherProtocol
from utils.errors import UnsupportedRecipientError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    import firebase_admin

    from api.connectors.firebase.options import FirebaseOptions
    from app.domain.push import DispatchContext, DispatchResult, PushNotification
    from app.protocols.dispatch_observer import DispatchObserverProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "firebase_push_dispatcher"

# Limite de mensagens por chamada de send_each no FCM
MAX_BATCH_SIZE = 500


class FirebasePushDispatcher(PushDispatcherProtocol):
    """Envia PushNotification para FCM usando um app firebase_admin cacheado."""

    __slots__ = ("_app", "_observers", "_options")

    def __init__(
        self,
        options: FirebaseOptions,
        *,
        observers: Iterable[DispatchObserverProtocol] = (),
        app: firebase_admin.App | None = None,
    ) -> None:
        """Inicializa o dispatcher.

        Args:
            options: Opções do app Firebase.
            observers: Recebem resultados agrupados após cada envio.
            app: App já resolvido (default: registro por app_name).

        Raises:
            ValueError: Se options for None.
        """
        if options is None:
            raise ValueError("options é obrigatório")
        self._options = options
        self._app = app if app is not None else get_or_create_app(options)
        self._observers = tuple(observers)

    @property
    def app(self) -> firebase_admin.App:
        return self._app

    async def dispatch(
        self,
        notification: PushNotification,
        context: DispatchContext,
    ) -> list[DispatchResult]:
        """Envia a notificação para todos os destinatários.

        Args:
            notification: Título, corpo, imagem e destinatários.
            context: Contexto com o content model do template.

        Returns:
            Um DispatchResult por destinatário, na mesma ordem.

        Raises:
            FirebaseError: Falha do SDK no envio do lote.
            ValueError: Mensagem rejeitada pelo SDK antes do envio.
        """
        with correlation_scope():
            return await self._dispatch(notification, context)

    async def _dispatch(
        self,
        notification: PushNotification,
        context: DispatchContext,
    ) -> list[DispatchResult]:
        started = time.perf_counter()
        data = normalize(context.content_model)

        slots: list[DispatchResult | None] = [None] * len(notification.recipients)
        pending: list[tuple[int, messaging.Message]] = []
        for index, recipient in enumerate(notification.recipients):
            try:
                pending.append((index, build_message(notification, recipient, data)))
            except UnsupportedRecipientError as exc:
                slots[index] = failed_result(exc, context)

        for start in range(0, len(pending), MAX_BATCH_SIZE):
            chunk = pending[start : start + MAX_BATCH_SIZE]
            batch = await self._send_batch([message for _, message in chunk])
            for (index, _), response in zip(chunk, batch.responses, strict=True):
                slots[index] = from_send_response(response, context)

        results = [result for result in slots if result is not None]
        successes = [result for result in results if result.status.is_success()]
        failures = [result for result in results if not result.status.is_success()]
        self._notify(context, notification, successes, failures)

        latency_ms = (time.perf_counter() - started) * 1000
        record_latency(_COMPONENT, "dispatch", latency_ms, get_correlation_id())
        record_dispatch_outcome(
            context.channel_provider_id, len(successes), len(failures), get_correlation_id()
        )
        logger.info(
            "firebase_push_dispatched",
            extra={
                "component": _COMPONENT,
                "app_name": self._options.app_name,
                "recipient_count": len(results),
                "success_count": len(successes),
                "failure_count": len(failures),
                "has_data": data is not None,
                "correlation_id": get_correlation_id(),
            },
        )
        return results

    async def _send_batch(self, messages: list[messaging.Message]) -> messaging.BatchResponse:
        try:
            return await asyncio.to_thread(messaging.send_each, messages, app=self._app)
        except (FirebaseError, ValueError) as exc:
            logger.error(
                "firebase_send_each_failed",
                extra={
                    "component": _COMPONENT,
                    "app_name": self._options.app_name,
                    "batch_size": len(messages),
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise

    def _notify(
        self,
        context: DispatchContext,
        notification: PushNotification,
        successes: Sequence[DispatchResult],
        failures: Sequence[DispatchResult],
    ) -> None:
        for observer in self._observers:
            if successes:
                observer.on_dispatched(context, notification, successes)
            if failures:
                observer.on_error(context, notification, failures)


__all__ = ["MAX_BATCH_SIZE", "FirebasePushDispatcher"]
