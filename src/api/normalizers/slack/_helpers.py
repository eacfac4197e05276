"""Helpers de leitura tolerante para payloads Slack.

Payloads do Slack são dicts pouco tipados; estes helpers devolvem
valores neutros ("" / lista vazia) em vez de levantar erro.
"""

from __future__ import annotations

from typing import Any


def as_str(value: Any) -> str:
    """Retorna o valor se for string, senão string vazia."""
    return value if isinstance(value, str) else ""


def as_dicts(value: Any) -> list[dict[str, Any]]:
    """Retorna apenas os itens dict de uma lista (ou lista vazia)."""
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, dict)]


def as_int(value: Any, default: int = 0) -> int:
    """Converte para int sem levantar erro."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return default


def text_of(obj: Any) -> str:
    """Extrai o texto de um text object (plain_text/mrkdwn) ou string."""
    if isinstance(obj, str):
        return obj
    if isinstance(obj, dict):
        return as_str(obj.get("text"))
    return ""


def join_non_empty(parts: list[str], separator: str) -> str:
    """Junta as partes não vazias (ignorando só-espaço) com o separador."""
    return separator.join(part for part in parts if part.strip())
