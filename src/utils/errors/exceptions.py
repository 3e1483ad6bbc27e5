"""Exceções de domínio para falhas de envio de push."""

from __future__ import annotations


class PushDispatchError(RuntimeError):
    """Base para falhas do connector de push."""


class FirebaseConfigurationError(PushDispatchError):
    """Opções do Firebase inválidas ou incompletas."""


class CredentialNotSupportedError(FirebaseConfigurationError):
    """Nenhuma forma de credencial reconhecida foi informada."""


class UnsupportedRecipientError(PushDispatchError):
    """Destinatário sem tipo de endereço suportado (device token ou tópico)."""
