"""Conector Firebase - adapter de borda para o SDK firebase_admin.

Único ponto de IO para o canal push.
Responsabilidades:
- Conversão de opções/credenciais para o SDK
- Registro de apps por nome
- Envio em lote (send_each) e tradução de resultados
"""

from .app_registry import clear_app_cache, get_or_create_app
from .dispatcher import MAX_BATCH_SIZE, FirebasePushDispatcher
from .options import FirebaseCredential, FirebaseOptions, create_credential, to_app_options
from .results import failed_result, from_send_response

__all__ = [
    "MAX_BATCH_SIZE",
    "FirebaseCredential",
    "FirebaseOptions",
    "FirebasePushDispatcher",
    "clear_app_cache",
    "create_credential",
    "failed_result",
    "from_send_response",
    "get_or_create_app",
    "to_app_options",
]
