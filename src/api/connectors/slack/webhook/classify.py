"""Classificação do payload da Events API do Slack.

Dois formatos tratados:
- handshake (`url_verification`): o challenge é devolvido sem alteração
- envelope (`event_callback`): carrega `event`, `team_id`, `event_id`, `event_time`

Qualquer outro formato é rejeitado pela rota.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .receive import WebhookRequestError

URL_VERIFICATION = "url_verification"


class UnsupportedPayloadError(WebhookRequestError):
    """Payload que não é handshake nem envelope de evento."""


class SlackUrlVerification(BaseModel):
    """Handshake de verificação do endpoint."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["url_verification"]
    challenge: str
    token: str | None = None


class SlackEventCallback(BaseModel):
    """Envelope de evento (EnvelopedEvent)."""

    model_config = ConfigDict(extra="ignore")

    type: str = "event_callback"
    team_id: str | None = None
    event_id: str | None = None
    event_time: int | None = None
    event: dict[str, Any] = Field(default_factory=dict)


def classify_payload(payload: dict[str, Any]) -> SlackUrlVerification | SlackEventCallback:
    """Classifica o payload bruto.

    Args:
        payload: JSON do request já parseado

    Raises:
        UnsupportedPayloadError: Se não for handshake nem envelope

    Returns:
        SlackUrlVerification ou SlackEventCallback
    """
    try:
        if payload.get("type") == URL_VERIFICATION:
            return SlackUrlVerification.model_validate(payload)
        if isinstance(payload.get("event"), dict):
            return SlackEventCallback.model_validate(payload)
    except PydanticValidationError as exc:
        raise UnsupportedPayloadError("invalid_envelope") from exc
    raise UnsupportedPayloadError("unsupported_payload")
