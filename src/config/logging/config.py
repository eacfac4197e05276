"""Configuração de logging estruturado (JSON) do serviço.

Chamado uma única vez pelo bootstrap. Todo log sai como um objeto JSON
por linha com service, correlation_id, level, logger e message, mais os
campos passados em `extra`.

    logger.info("slashwork_mutation_succeeded", extra={"destination_id": "P1"})

Nunca logar bearer token, signing secret ou o corpo das mensagens.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from config.logging.filters import ContextFilter, SecretMaskingFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "slack_mirror"

# httpx loga cada request (com URL) em INFO; uvicorn.access duplica o webhook_received
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    secrets: Iterable[str] = (),
    json_output: bool = True,
) -> logging.Handler:
    """Instala um único handler no root logger.

    Args:
        level: Nível de log (case insensitive)
        service_name: Valor do campo `service`
        correlation_id_getter: Fonte do correlation_id do contexto atual
        secrets: Valores a mascarar caso apareçam em mensagens
        json_output: False usa formato texto (testes/debug local)

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter() if json_output else create_text_formatter())
    handler.addFilter(ContextFilter(service_name, correlation_id_getter))
    handler.addFilter(SecretMaskingFilter(secrets))

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, root.level))

    return handler


def get_logger(name: str) -> logging.Logger:
    """Atalho para logging.getLogger (campos de contexto vêm do handler)."""
    return logging.getLogger(name)
