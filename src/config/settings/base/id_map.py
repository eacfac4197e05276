"""Settings do mapeamento Slack ts → ID Slashwork.

O mapeamento é opcional: sem ele apenas mensagens raiz são espelhadas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

IdMapBackend = Literal["none", "memory", "redis"]

_VALID_BACKENDS = ("none", "memory", "redis")


@dataclass(frozen=True)
class IdMapSettings:
    """Configurações do store de mapeamento de IDs.

    Attributes:
        backend: Backend do mapeamento (none|memory|redis)
        ttl_seconds: TTL das entradas; 0 = sem expiração
        key_prefix: Namespace das chaves no Redis
    """

    backend: IdMapBackend = "memory"
    ttl_seconds: int = 0
    key_prefix: str = "slack_id_map:"

    @property
    def enabled(self) -> bool:
        """Retorna True se algum store está configurado."""
        return self.backend != "none"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do mapeamento.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in _VALID_BACKENDS:
            errors.append(f"ID_MAP_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "ID_MAP_BACKEND=memory proibido em staging/production. "
                "Use redis ou none."
            )

        if self.backend == "redis" and not base.redis_url:
            errors.append("ID_MAP_BACKEND=redis requer REDIS_URL configurado")

        if self.ttl_seconds < 0:
            errors.append("ID_MAP_TTL_SECONDS deve ser >= 0")

        if not self.key_prefix:
            errors.append("ID_MAP_KEY_PREFIX não pode ser vazio")

        return errors


def _load_id_map_from_env() -> IdMapSettings:
    """Carrega IdMapSettings de variáveis de ambiente."""
    backend_str = os.getenv("ID_MAP_BACKEND", "memory").lower()
    backend: IdMapBackend = backend_str if backend_str in _VALID_BACKENDS else "memory"
    return IdMapSettings(
        backend=backend,
        ttl_seconds=int(os.getenv("ID_MAP_TTL_SECONDS", "0")),
        key_prefix=os.getenv("ID_MAP_KEY_PREFIX", "slack_id_map:"),
    )


@lru_cache(maxsize=1)
def get_id_map_settings() -> IdMapSettings:
    """Retorna instância cacheada de IdMapSettings."""
    return _load_id_map_from_env()
