"""Payload builders por provider.

Estrutura:
- firebase/: data payload achatado e firebase_admin.messaging.Message
"""

__all__: list[str] = []
