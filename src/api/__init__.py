"""API: camada de borda com o SDK firebase_admin.

Subpastas:
- connectors/: opções, registro de apps e envio (único ponto de IO)
- payload_builders/: normalização do content model e montagem de mensagens

NÃO PODE conter: bootstrap, leitura de env, orquestração de observers.
"""
