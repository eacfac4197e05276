"""Protocolo opcional de resolução de user_id Slack → nome exibido."""

from __future__ import annotations

from typing import Protocol


class UsernameResolverProtocol(Protocol):
    """Contrato mínimo para resolver nomes de usuários Slack.

    Retorna None quando o nome não pode ser resolvido; nesse caso a
    mensagem segue sem prefixo.
    """

    async def resolve(self, user_id: str) -> str | None: ...
