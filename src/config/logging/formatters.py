"""Formatters de logging: JSON (python-json-logger) e texto para debug local."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log, na ordem de saída
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "service",
    "correlation_id",
    "message",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON; campos de `extra` entram como chaves de topo.

    Exemplo:
        {"asctime": "...", "level": "INFO", "logger": "app.use_cases.slack.mirror_message",
         "service": "slack_mirror", "correlation_id": "abc", "message": "metric_mirror_outcome",
         "outcome": "mirrored", "operation": "create_post"}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Formatter legível para testes e desenvolvimento."""
    return logging.Formatter(TEXT_FORMAT)
