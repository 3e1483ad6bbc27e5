"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CredentialNotSupportedError,
    FirebaseConfigurationError,
    PushDispatchError,
    UnsupportedRecipientError,
)

__all__ = [
    "CredentialNotSupportedError",
    "FirebaseConfigurationError",
    "PushDispatchError",
    "UnsupportedRecipientError",
]
