"""Bootstrap da aplicação: logging e validação de settings no startup.

O wiring de dependências concretas fica em `app.bootstrap.dependencies`.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_id_map_settings,
    get_slack_settings,
    get_slashwork_settings,
)

SERVICE_NAME = "slack_mirror"
FALLBACK_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def _known_secrets() -> list[str]:
    return [
        get_slashwork_settings().bearer_token,
        get_slack_settings().signing_secret,
    ]


def initialize_app() -> None:
    """Configura logging JSON com correlation_id e mascaramento de segredos.

    LOG_LEVEL inválido não impede o boot: cai para INFO e o erro aparece
    em validate_runtime_settings.
    """
    level = get_base_settings().log_level
    try:
        configure_logging(
            level=level,
            service_name=SERVICE_NAME,
            correlation_id_getter=get_correlation_id,
            secrets=_known_secrets(),
        )
    except ValueError:
        configure_logging(
            level=FALLBACK_LOG_LEVEL,
            service_name=SERVICE_NAME,
            correlation_id_getter=get_correlation_id,
            secrets=_known_secrets(),
        )


def initialize_test_app() -> None:
    """Logging em texto e DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
        json_output=False,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em staging/production falha rápido (RuntimeError); em development
    apenas registra os problemas e segue.
    """
    base = get_base_settings()
    slashwork = get_slashwork_settings()

    errors: list[str] = [f"base: {e}" for e in base.validate()]
    errors += [f"id_map: {e}" for e in get_id_map_settings().validate(base)]
    errors += [f"slack: {e}" for e in get_slack_settings().validate()]
    errors += [f"slashwork: {e}" for e in slashwork.validate()]

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "environment": base.environment,
                "slashwork": slashwork.redacted(),
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {e}" for e in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
