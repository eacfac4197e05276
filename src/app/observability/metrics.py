"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Resultado do espelhamento: mirrored | skipped | failed, com motivo

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("slashwork", "create_post", (time.perf_counter() - start) * 1000)

    record_mirror_outcome("skipped", reason="channel_not_mapped", source_id="100.1")
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
        component: Nome do componente (ex: "slashwork", "id_map")
        operation: Nome da operação (ex: "create_post", "find")
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


def record_mirror_outcome(
    outcome: str,
    *,
    reason: str | None = None,
    source_id: str | None = None,
    destination_id: str | None = None,
    operation: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado semântico de um evento espelhado.

    Args:
        outcome: "mirrored", "skipped" ou "failed"
        reason: Motivo do skip/falha (ex: "already_mirrored", "destination_error")
        source_id: ts da mensagem Slack
        destination_id: ID criado no Slashwork (quando houver)
        operation: "create_post" ou "create_comment"
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, str | None] = {
        "metric_type": "mirror_outcome",
        "outcome": outcome,
        "reason": reason,
        "source_id": source_id,
        "destination_id": destination_id,
        "operation": operation,
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id

    level = logging.WARNING if outcome == "failed" else logging.INFO
    logger.log(level, "metric_mirror_outcome", extra=extra)
