"""Registro de métricas via structured logging.

As métricas são logs estruturados (`metric_type` no extra) agregados
depois pelo backend de logs.

Uso:
    from app.observability import record_latency, record_dispatch_outcome

    started = time.perf_counter()
    # ... envio ...
    record_latency("firebase_push_dispatcher", "dispatch", elapsed_ms, correlation_id)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "firebase_push_dispatcher")
        operation: Nome da operação (ex: "dispatch")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_dispatch_outcome(
    provider: str,
    success_count: int,
    failure_count: int,
    correlation_id: str | None = None,
) -> None:
    """Registra contadores de envios aceitos/rejeitados pelo provider."""
    logger.info(
        "metric_dispatch_outcome",
        extra={
            "metric_type": "dispatch_outcome",
            "provider": provider,
            "success_count": success_count,
            "failure_count": failure_count,
            "correlation_id": correlation_id,
        },
    )
