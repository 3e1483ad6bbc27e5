"""Modelos de dominio para envio de push notifications.

Contratos independentes do provider: o connector Firebase traduz estes
modelos para mensagens do SDK e devolve `DispatchResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AddressType(StrEnum):
    """Tipos de endereco suportados para push."""

    DEVICE_TOKEN = "device-token"
    TOPIC = "topic"


class PlatformIdentityAddress(BaseModel):
    """Destinatario de uma push notification."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    value: str = Field(..., min_length=1, description="Token do device ou nome do topico.")
    type: AddressType | None = Field(default=None, description="Tipo do endereco.")

    def if_type(self, address_type: AddressType) -> str | None:
        """Retorna o valor apenas se o endereco for do tipo informado."""
        return self.value if self.type == address_type else None


class PushNotification(BaseModel):
    """Conteudo renderizado de uma push notification."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, description="Titulo exibido no device.")
    body: str | None = Field(default=None, description="Texto principal da notificacao.")
    image_url: str | None = Field(default=None, description="URL publica de imagem.")
    recipients: list[PlatformIdentityAddress] = Field(
        default_factory=list,
        description="Destinatarios (um envio por destinatario).",
    )


@dataclass(frozen=True)
class DispatchContext:
    """Contexto do envio.

    Attributes:
        content_model: Modelo usado no template (mapping, record ou None).
            Vira o payload `data` da mensagem apos normalizacao.
        channel_id: Canal logico (ex: "push").
        channel_provider_id: Provider que executou o envio.
    """

    content_model: Any = None
    channel_id: str = "push"
    channel_provider_id: str = "firebase"


class DispatchStatus(StrEnum):
    """Status final de um envio individual."""

    DISPATCHED = "dispatched"
    EXCEPTION = "exception"

    def is_success(self) -> bool:
        """Retorna True se o envio foi aceito pelo provider."""
        return self is DispatchStatus.DISPATCHED


@dataclass(frozen=True)
class DispatchResult:
    """Resultado de um envio individual."""

    status: DispatchStatus
    resource_id: str | None = None
    channel_id: str | None = None
    channel_provider_id: str | None = None
    exception: BaseException | None = None

    @property
    def is_success(self) -> bool:
        return self.status.is_success()


__all__ = [
    "AddressType",
    "DispatchContext",
    "DispatchResult",
    "DispatchStatus",
    "PlatformIdentityAddress",
    "PushNotification",
]
