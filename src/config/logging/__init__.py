"""Logging estruturado do Slack Mirror (JSON por linha).

    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", secrets=[bearer_token, signing_secret])
    logger = get_logger(__name__)
    logger.info("mirror_skipped", extra={"reason": "channel_not_mapped"})
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import ContextFilter, SecretMaskingFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ContextFilter",
    "SecretMaskingFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
