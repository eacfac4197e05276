"""Agregador de settings do Slack Mirror.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    IdMapBackend,
    IdMapSettings,
    get_base_settings,
    get_id_map_settings,
)

# Canal de origem
from config.settings.slack import (
    SlackSettings,
    get_slack_settings,
    parse_channel_group_mappings,
)

# Destino
from config.settings.slashwork import (
    SlashworkSettings,
    get_slashwork_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    "Environment",
    "IdMapBackend",
    "IdMapSettings",
    # Channels
    "SlackSettings",
    "SlashworkSettings",
    "get_base_settings",
    "get_id_map_settings",
    "get_slack_settings",
    "get_slashwork_settings",
    "parse_channel_group_mappings",
]
