"""Cliente HTTP base para conectores da camada API.

Sem retry nem backoff: falhas transitórias dependem da reentrega do
Slack (at-least-once) e do dedupe por mapeamento.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Falha de transporte (timeout ou conexão); a mensagem é um código curto."""


class HttpClient:
    """Cliente HTTP simples para chamadas externas (uma tentativa por chamada)."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"timeout_seconds": self._config.timeout_seconds})
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise HttpError("http_connection_error") from exc
