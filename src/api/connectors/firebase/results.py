"""Tradução de respostas do SDK em DispatchResult."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.push import DispatchResult, DispatchStatus

if TYPE_CHECKING:
    from firebase_admin.messaging import SendResponse

    from app.domain.push import DispatchContext


def from_send_response(response: SendResponse, context: DispatchContext) -> DispatchResult:
    """Converte o resultado de um envio individual do `send_each`."""
    if response.success:
        return DispatchResult(
            status=DispatchStatus.DISPATCHED,
            resource_id=response.message_id,
            channel_id=context.channel_id,
            channel_provider_id=context.channel_provider_id,
        )
    return failed_result(response.exception, context)


def failed_result(exception: BaseException | None, context: DispatchContext) -> DispatchResult:
    """Resultado de falha para um destinatário (sem message_id)."""
    return DispatchResult(
        status=DispatchStatus.EXCEPTION,
        channel_id=context.channel_id,
        channel_provider_id=context.channel_provider_id,
        exception=exception,
    )


__all__ = ["failed_result", "from_send_response"]
