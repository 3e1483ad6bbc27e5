"""App: orquestração, domínio e infraestrutura do serviço de push.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de push (notificação, destinatários, resultados)
- services/: serviços de aplicação (observers de entrega)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
