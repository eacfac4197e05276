"""Filters de logging do Slack Mirror.

- ContextFilter: injeta `service` e `correlation_id` em todo record
- SecretMaskingFilter: mascara segredos conhecidos (bearer token do
  Slashwork, signing secret do Slack) se algum vazar para uma mensagem
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

MASK = "[REDACTED]"


class ContextFilter(logging.Filter):
    """Enriquece o record com service e correlation_id; nunca descarta.

    Um correlation_id passado explicitamente via `extra` tem precedência
    sobre o valor do contexto (tasks de background repassam o da requisição).
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service_name
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        return True


class SecretMaskingFilter(logging.Filter):
    """Substitui ocorrências de segredos pela máscara na mensagem final."""

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        # Segredos curtos demais gerariam mascaramento acidental
        self._secrets = tuple(s for s in secrets if s and len(s) >= 4)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True
        message = record.getMessage()
        masked = message
        for secret in self._secrets:
            masked = masked.replace(secret, MASK)
        if masked != message:
            record.msg = masked
            record.args = None
        return True
