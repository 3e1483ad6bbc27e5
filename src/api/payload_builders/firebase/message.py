"""Builder de mensagens FCM (firebase_admin.messaging.Message)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from firebase_admin import messaging

from app.domain.push import AddressType
from utils.errors import UnsupportedRecipientError

if TYPE_CHECKING:
    from app.domain.push import PlatformIdentityAddress, PushNotification


def build_message(
    notification: PushNotification,
    recipient: PlatformIdentityAddress,
    data: dict[str, str] | None,
) -> messaging.Message:
    """Constrói mensagem para um destinatário.

    Args:
        notification: Conteúdo renderizado da push.
        recipient: Device token ou tópico.
        data: Payload de dados já normalizado (None omite o campo).

    Returns:
        Mensagem pronta para envio.

    Raises:
        UnsupportedRecipientError: Se o destinatário não for token nem tópico.
    """
    token = recipient.if_type(AddressType.DEVICE_TOKEN)
    topic = recipient.if_type(AddressType.TOPIC)
    if token is None and topic is None:
        raise UnsupportedRecipientError(
            f"Tipo de destinatário não suportado: {recipient.type}"
        )

    # Só o destino presente vai para o SDK
    target = {"token": token} if token is not None else {"topic": topic}
    return messaging.Message(
        data=data,
        notification=messaging.Notification(
            title=notification.title,
            body=notification.body,
            image=notification.image_url,
        ),
        **target,
    )


__all__ = ["build_message"]
