"""Endpoint de eventos do Slack (Events API).

POST /webhook/slack/events

1. Valida assinatura (X-Slack-Signature) e JSON
2. `url_verification`: devolve o challenge
3. `event_callback`: extrai a mensagem, despacha o espelhamento e responde 200

O Slack reenvia eventos sem resposta em ~3s (X-Slack-Retry-Num), por isso
o modo async responde antes de falar com o Slashwork. Reenvios de
mensagens já espelhadas viram skip `already_mirrored` no use case.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.slack.webhook import (
    InvalidSignatureError,
    MissingMessageIdError,
    SlackEventCallback,
    SlackUrlVerification,
    WebhookRequestError,
    classify_payload,
    parse_webhook_request,
)
from api.normalizers.slack import extract_message_event
from api.routes.slack.webhook_runtime import dispatch_inbound_processing
from app.observability import correlation_scope
from config.settings import SlackSettings, get_slack_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _plain(status_code: int, content: str) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


def _classify(
    raw_body: bytes, headers: dict[str, str], settings: SlackSettings
) -> tuple[SlackUrlVerification | SlackEventCallback, bool]:
    """Valida a requisição e retorna (payload tipado, assinatura_verificada)."""
    payload, signature = parse_webhook_request(
        raw_body=raw_body,
        headers=headers,
        secret=settings.signing_secret or None,
        tolerance_seconds=settings.signature_tolerance_seconds,
    )
    return classify_payload(payload), signature.valid and not signature.skipped


@router.post("/events", response_model=None)
async def receive_events(request: Request) -> Response | dict[str, Any]:
    """Recebe handshake e eventos do Slack."""
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        settings = get_slack_settings()
        raw_body = await request.body()
        headers = dict(request.headers)
        log_base = {"channel": "slack", "correlation_id": correlation_id}

        try:
            classified, signature_verified = _classify(raw_body, headers, settings)
        except InvalidSignatureError as exc:
            logger.warning("webhook_signature_invalid", extra={**log_base, "error": str(exc)})
            return _plain(status.HTTP_401_UNAUTHORIZED, "Unauthorized")
        except WebhookRequestError as exc:
            logger.warning("webhook_payload_invalid", extra={**log_base, "error": str(exc)})
            return _plain(status.HTTP_400_BAD_REQUEST, "Bad Request")

        if isinstance(classified, SlackUrlVerification):
            logger.info("webhook_url_verification", extra=log_base)
            return {"challenge": classified.challenge}

        logger.info(
            "webhook_received",
            extra={
                **log_base,
                "signature_verified": signature_verified,
                "payload_size": len(raw_body),
                "team_id": classified.team_id,
                "event_id": classified.event_id,
                "event_type": classified.event.get("type"),
                "retry_num": headers.get("x-slack-retry-num"),
                "retry_reason": headers.get("x-slack-retry-reason"),
            },
        )

        try:
            message = extract_message_event(classified.event)
        except MissingMessageIdError as exc:
            logger.warning("webhook_event_invalid", extra={**log_base, "error": str(exc)})
            return _plain(status.HTTP_400_BAD_REQUEST, "Bad Request")

        if message is None:
            logger.debug("webhook_event_ignored", extra=log_base)
        else:
            await dispatch_inbound_processing(
                message=message,
                correlation_id=correlation_id,
                settings=settings,
            )

        return {"status": "received", "correlation_id": correlation_id}
