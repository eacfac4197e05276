"""Settings de runtime comuns ao serviço inteiro.

Ambiente, nível de log e conexão Redis. Os demais módulos de settings
consultam `BaseSettings` para decidir o que é proibido fora de development.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

_STRICT_ENVIRONMENTS = frozenset({"staging", "production"})
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base.

    Attributes:
        environment: development|staging|production (aliases prod/stage aceitos)
        log_level: Nível do root logger
        redis_url: URL Redis, usada apenas quando ID_MAP_BACKEND=redis
    """

    environment: Environment = "development"
    log_level: str = "INFO"
    redis_url: str = ""

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_strict(self) -> bool:
        """True quando settings inválidas devem impedir o boot."""
        return self.environment in _STRICT_ENVIRONMENTS

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        if self.redis_url and not self.redis_url.startswith(("redis://", "rediss://", "unix://")):
            errors.append("REDIS_URL deve usar esquema redis://, rediss:// ou unix://")
        return errors


def parse_environment(raw: str) -> Environment:
    """Normaliza ENVIRONMENT; valores desconhecidos (dev, test, local) viram development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings lida do ambiente."""
    return BaseSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT", "development")),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        redis_url=os.getenv("REDIS_URL", ""),
    )
