"""Validação de assinatura das requisições do Slack (v0, HMAC-SHA256).

Base assinada: ``v0:{X-Slack-Request-Timestamp}:{corpo bruto}``.
Sem signing secret configurado a validação é pulada (dev local).
"""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-slack-signature"
TIMESTAMP_HEADER = "x-slack-request-timestamp"
SIGNATURE_VERSION = "v0"


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação de assinatura."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def verify_slack_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    tolerance_seconds: int = 300,
    now: float | None = None,
) -> SignatureResult:
    """Verifica X-Slack-Signature contra o corpo bruto.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (qualquer capitalização)
        secret: Signing secret do app Slack
        tolerance_seconds: Idade máxima aceita do timestamp
        now: Relógio injetável (testes)

    Returns:
        SignatureResult (skipped=True quando não há secret)
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    lowered = {key.lower(): value for key, value in headers.items()}
    signature = lowered.get(SIGNATURE_HEADER)
    timestamp = lowered.get(TIMESTAMP_HEADER)
    if not signature or not timestamp:
        return SignatureResult(valid=False, error="missing_signature_headers")

    try:
        timestamp_value = int(timestamp)
    except ValueError:
        return SignatureResult(valid=False, error="invalid_timestamp")

    current = time.time() if now is None else now
    if abs(current - timestamp_value) > tolerance_seconds:
        return SignatureResult(valid=False, error="stale_timestamp")

    base = f"{SIGNATURE_VERSION}:{timestamp}:".encode() + raw_body
    digest = hmac.new(secret.encode(), base, hashlib.sha256).hexdigest()
    expected = f"{SIGNATURE_VERSION}={digest}"
    if not hmac.compare_digest(expected, signature):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)
