"""Primeira etapa do webhook Slack: assinatura e decodificação do corpo.

A assinatura é verificada sobre os bytes brutos, antes de qualquer parse.
Nenhum trecho do corpo entra nas mensagens de erro (pode conter texto de
mensagens dos usuários).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ..signature import SignatureResult, verify_slack_signature

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Requisição de webhook rejeitada; a mensagem é um código curto."""


class InvalidSignatureError(WebhookRequestError):
    pass


class InvalidJsonError(WebhookRequestError):
    pass


def _decode_object(raw_body: bytes) -> dict[str, Any]:
    if not raw_body.strip():
        raise InvalidJsonError("empty_body")
    try:
        decoded = json.loads(raw_body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc
    if not isinstance(decoded, dict):
        raise InvalidJsonError("payload_not_object")
    return decoded


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    tolerance_seconds: int = 300,
) -> tuple[dict[str, Any], SignatureResult]:
    """Verifica a assinatura e devolve o corpo como dict.

    Sem `secret` a verificação é pulada (SignatureResult.skipped).

    Raises:
        InvalidSignatureError: headers ausentes, timestamp fora da janela ou HMAC divergente
        InvalidJsonError: corpo vazio, JSON inválido ou raiz que não é objeto
    """
    result = verify_slack_signature(raw_body, headers, secret, tolerance_seconds=tolerance_seconds)
    if not result.valid:
        raise InvalidSignatureError(result.error or "signature_mismatch")
    return _decode_object(raw_body), result
