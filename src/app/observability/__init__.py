"""Observabilidade: correlation_id e métricas emitidas como logs estruturados."""

from app.observability.correlation import (
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_mirror_outcome

__all__ = [
    "correlation_scope",
    "get_correlation_id",
    "record_latency",
    "record_mirror_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]
