"""Connectors por provider: adapters de borda para SDKs externos.

Estrutura:
- firebase/: Firebase Cloud Messaging via firebase_admin
"""

__all__: list[str] = []
