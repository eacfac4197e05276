"""Settings específicas do Slack (Events API).

Configurações do canal de origem: assinatura do webhook, modo de
processamento e mapeamento de canais Slack → grupos Slashwork.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

logger = logging.getLogger(__name__)

# Janela de tolerância recomendada pelo Slack para X-Slack-Request-Timestamp
DEFAULT_SIGNATURE_TOLERANCE_SECONDS: int = 300


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do canal Slack.

    Attributes:
        signing_secret: Secret para validação HMAC (X-Slack-Signature)
        channel_group_mappings: Mapa channel_id Slack → group_id Slashwork
        webhook_processing_mode: Modo de processamento do webhook (async|inline)
        signature_tolerance_seconds: Idade máxima aceita do timestamp assinado
    """

    signing_secret: str = field(default="", repr=False)
    channel_group_mappings: dict[str, str] = field(default_factory=dict)
    webhook_processing_mode: str = "async"
    signature_tolerance_seconds: int = DEFAULT_SIGNATURE_TOLERANCE_SECONDS

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_secret:
            errors.append("SLACK_SIGNING_SECRET não configurado")

        if not self.channel_group_mappings:
            errors.append("SLACK_CHANNEL_GROUP_MAPPINGS vazio: nenhum canal será espelhado")

        if self.webhook_processing_mode not in ("async", "inline"):
            errors.append("SLACK_WEBHOOK_PROCESSING_MODE deve ser 'async' ou 'inline'")

        if self.signature_tolerance_seconds <= 0:
            errors.append("SLACK_SIGNATURE_TOLERANCE_SECONDS deve ser > 0")

        return errors


def parse_channel_group_mappings(raw: str) -> dict[str, str]:
    """Converte o mapeamento de canais vindo do ambiente.

    Aceita objeto JSON (``{"C1": "G1"}``) ou pares ``C1=G1,C2=G2``.
    Entradas vazias ou malformadas são ignoradas.
    """
    raw = raw.strip()
    if not raw:
        return {}

    if raw.startswith("{"):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("slack_channel_mappings_invalid_json")
            return {}
        if not isinstance(data, dict):
            return {}
        return {
            str(channel).strip(): str(group).strip()
            for channel, group in data.items()
            if str(channel).strip() and str(group).strip()
        }

    mappings: dict[str, str] = {}
    for pair in raw.split(","):
        channel, sep, group = pair.partition("=")
        if not sep or not channel.strip() or not group.strip():
            continue
        mappings[channel.strip()] = group.strip()
    return mappings


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "").lower()
    default_processing_mode = (
        "inline" if environment in ("development", "dev", "test") else "async"
    )
    return SlackSettings(
        signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
        channel_group_mappings=parse_channel_group_mappings(
            os.getenv("SLACK_CHANNEL_GROUP_MAPPINGS", "")
        ),
        webhook_processing_mode=os.getenv(
            "SLACK_WEBHOOK_PROCESSING_MODE", default_processing_mode
        ).lower(),
        signature_tolerance_seconds=int(
            os.getenv(
                "SLACK_SIGNATURE_TOLERANCE_SECONDS",
                str(DEFAULT_SIGNATURE_TOLERANCE_SECONDS),
            )
        ),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
