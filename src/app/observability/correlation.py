"""correlation_id por requisição via ContextVar.

Tasks criadas com asyncio herdam uma cópia do contexto, então o
espelhamento em background continua logando o id da requisição que o
originou mesmo depois do reset.

    with correlation_scope(request.headers.get("x-correlation-id")) as cid:
        ...
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_current: ContextVar[str] = ContextVar("slack_mirror_correlation_id", default="")


def get_correlation_id() -> str:
    return _current.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o id do contexto atual; None ou vazio gera um UUID4."""
    return _current.set(correlation_id or uuid.uuid4().hex)


def reset_correlation_id(token: Token[str]) -> None:
    _current.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Ativa um correlation_id enquanto o bloco executa e o restaura na saída."""
    token = set_correlation_id(correlation_id)
    try:
        yield _current.get()
    finally:
        _current.reset(token)
