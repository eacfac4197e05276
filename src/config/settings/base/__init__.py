"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.id_map import (
    IdMapBackend,
    IdMapSettings,
    get_id_map_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Types
    "Environment",
    "IdMapBackend",
    # Id map
    "IdMapSettings",
    "get_base_settings",
    "get_id_map_settings",
]
