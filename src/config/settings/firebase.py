"""Settings de integracao com Firebase Cloud Messaging.

Centraliza a leitura de env do connector Firebase. A credencial e resolvida
na ordem: JSON inline, arquivo, access token, application default.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_APP_NAME = "[DEFAULT]"


class FirebaseSettings(BaseModel):
    """Configuracoes do app Firebase usado para envio de push."""

    model_config = ConfigDict(extra="ignore")

    app_name: str = Field(
        default=DEFAULT_APP_NAME,
        description="Nome do app no firebase_admin (cache por nome).",
    )
    project_id: str | None = Field(default=None, description="ID do projeto Firebase/GCP.")
    service_account_id: str | None = Field(
        default=None,
        description="Email da service account usada para assinar tokens.",
    )
    credentials_json: str | None = Field(
        default=None,
        description="Credencial JSON (service account ou authorized_user) em texto.",
    )
    credentials_file: str | None = Field(
        default=None,
        description="Caminho para arquivo JSON de credencial.",
    )
    access_token: str | None = Field(default=None, description="Access token OAuth2.")
    use_application_default: bool = Field(
        default=False,
        description="Usa Application Default Credentials do ambiente.",
    )

    def validate_settings(self) -> list[str]:
        """Valida configuracoes minimas do Firebase.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.app_name.strip():
            errors.append("FIREBASE_APP_NAME nao pode ser vazio")

        sources = [
            self.credentials_json,
            self.credentials_file,
            self.access_token,
        ]
        configured = sum(1 for source in sources if source) + int(self.use_application_default)
        if configured > 1:
            errors.append("Mais de uma fonte de credencial Firebase configurada")
        if configured == 0 and not self.project_id:
            errors.append("FIREBASE_PROJECT_ID ou credencial Firebase nao configurados")
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool com o mesmo padrao dos outros settings."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_firebase_from_env() -> FirebaseSettings:
    """Carrega FirebaseSettings a partir de variaveis de ambiente."""
    return FirebaseSettings(
        app_name=os.getenv("FIREBASE_APP_NAME", DEFAULT_APP_NAME),
        project_id=_read_optional_env("FIREBASE_PROJECT_ID"),
        service_account_id=_read_optional_env("FIREBASE_SERVICE_ACCOUNT_ID"),
        credentials_json=_read_optional_env("FIREBASE_CREDENTIALS_JSON"),
        credentials_file=_read_optional_env("FIREBASE_CREDENTIALS_FILE"),
        access_token=_read_optional_env("FIREBASE_ACCESS_TOKEN"),
        use_application_default=_parse_bool(
            os.getenv("FIREBASE_USE_APPLICATION_DEFAULT", "false")
        ),
    )


@lru_cache(maxsize=1)
def get_firebase_settings() -> FirebaseSettings:
    """Retorna instancia cacheada de FirebaseSettings."""
    return _load_firebase_from_env()


__all__ = ["DEFAULT_APP_NAME", "FirebaseSettings", "get_firebase_settings"]
