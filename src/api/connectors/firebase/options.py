"""Opções do app Firebase e conversão para o SDK firebase_admin.

`FirebaseCredential` aceita exatamente uma forma de credencial:
- Application Default Credentials
- Access token OAuth2
- JSON em texto (service account ou authorized_user)
- Caminho de arquivo JSON
- Stream legível com JSON
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from firebase_admin import credentials
from google.oauth2.credentials import Credentials as AccessTokenCredentials

from config.settings.firebase import DEFAULT_APP_NAME
from utils.errors import CredentialNotSupportedError, FirebaseConfigurationError

if TYPE_CHECKING:
    from config.settings import FirebaseSettings

logger = logging.getLogger(__name__)

_AUTHORIZED_USER_TYPE = "authorized_user"


@dataclass(frozen=True)
class FirebaseCredential:
    """Forma de autenticação do app Firebase (use as factories)."""

    is_default: bool = False
    access_token: str | None = None
    json_text: str | None = None
    file_path: str | None = None
    stream: IO[str] | IO[bytes] | None = None

    @classmethod
    def application_default(cls) -> FirebaseCredential:
        return cls(is_default=True)

    @classmethod
    def from_access_token(cls, access_token: str) -> FirebaseCredential:
        return cls(access_token=access_token)

    @classmethod
    def from_json(cls, json_text: str) -> FirebaseCredential:
        return cls(json_text=json_text)

    @classmethod
    def from_file(cls, file_path: str | Path) -> FirebaseCredential:
        return cls(file_path=str(file_path))

    @classmethod
    def from_stream(cls, stream: IO[str] | IO[bytes]) -> FirebaseCredential:
        return cls(stream=stream)

    @property
    def is_access_token(self) -> bool:
        return bool(self.access_token)

    @property
    def is_json(self) -> bool:
        return bool(self.json_text)

    @property
    def is_file_path(self) -> bool:
        return bool(self.file_path)

    @property
    def is_stream(self) -> bool:
        return self.stream is not None


@dataclass(frozen=True)
class FirebaseOptions:
    """Opções de criação do app Firebase.

    Attributes:
        app_name: Nome do app (apps são reutilizados por nome).
        project_id: ID do projeto; None deixa o SDK inferir da credencial.
        service_account_id: Service account usada para assinar tokens.
        credential: Credencial; None usa Application Default Credentials.
    """

    app_name: str = DEFAULT_APP_NAME
    project_id: str | None = None
    service_account_id: str | None = None
    credential: FirebaseCredential | None = None

    @classmethod
    def from_settings(cls, settings: FirebaseSettings) -> FirebaseOptions:
        """Monta opções a partir das settings de ambiente.

        Precedência da credencial: JSON, arquivo, access token, default.
        """
        credential: FirebaseCredential | None = None
        if settings.credentials_json:
            credential = FirebaseCredential.from_json(settings.credentials_json)
        elif settings.credentials_file:
            credential = FirebaseCredential.from_file(settings.credentials_file)
        elif settings.access_token:
            credential = FirebaseCredential.from_access_token(settings.access_token)
        elif settings.use_application_default:
            credential = FirebaseCredential.application_default()

        return cls(
            app_name=settings.app_name,
            project_id=settings.project_id,
            service_account_id=settings.service_account_id,
            credential=credential,
        )


def to_app_options(options: FirebaseOptions | None) -> tuple[Any, dict[str, str]]:
    """Converte FirebaseOptions em (credential, options) do firebase_admin.

    Args:
        options: Opções do app.

    Returns:
        Tupla com a credencial (ou None) e o dict de opções do app.

    Raises:
        ValueError: Se options for None.
        CredentialNotSupportedError: Se a credencial não tiver forma reconhecida.
        FirebaseConfigurationError: Se o JSON da credencial for inválido.
    """
    if options is None:
        raise ValueError("options é obrigatório")

    app_options: dict[str, str] = {}
    if options.project_id:
        app_options["projectId"] = options.project_id
    if options.service_account_id:
        app_options["serviceAccountId"] = options.service_account_id

    return create_credential(options.credential), app_options


def create_credential(firebase_credential: FirebaseCredential | None) -> Any:
    """Cria a credencial do SDK para a forma informada."""
    if firebase_credential is None:
        return None

    if firebase_credential.is_default:
        return credentials.ApplicationDefault()
    if firebase_credential.is_access_token:
        return AccessTokenCredentials(token=firebase_credential.access_token)
    if firebase_credential.is_json:
        return _credential_from_info(_parse_json(firebase_credential.json_text, source="json"))
    if firebase_credential.is_file_path:
        raw = Path(firebase_credential.file_path).read_text(encoding="utf-8")
        return _credential_from_info(_parse_json(raw, source="file"))
    if firebase_credential.is_stream:
        return _credential_from_info(_parse_json(firebase_credential.stream.read(), source="stream"))

    raise CredentialNotSupportedError(
        "No suitable credential method was found to generate a google credential."
    )


def _parse_json(raw: str | bytes, *, source: str) -> dict[str, Any]:
    try:
        info = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("firebase_credential_invalid_json", extra={"source": source})
        raise FirebaseConfigurationError(f"Credencial Firebase ({source}) não é JSON válido") from exc
    if not isinstance(info, dict):
        raise FirebaseConfigurationError(f"Credencial Firebase ({source}) deve ser um objeto JSON")
    return info


def _credential_from_info(info: dict[str, Any]) -> credentials.Base:
    if info.get("type") == _AUTHORIZED_USER_TYPE:
        return credentials.RefreshToken(info)
    return credentials.Certificate(info)


__all__ = [
    "FirebaseCredential",
    "FirebaseOptions",
    "create_credential",
    "to_app_options",
]
