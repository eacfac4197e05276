"""Webhook Slack: assinatura, parsing seguro e classificação."""

from api.normalizers.slack.extractor import MissingMessageIdError

from ..signature import SignatureResult, verify_slack_signature
from .classify import (
    SlackEventCallback,
    SlackUrlVerification,
    UnsupportedPayloadError,
    classify_payload,
)
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "MissingMessageIdError",
    "SignatureResult",
    "SlackEventCallback",
    "SlackUrlVerification",
    "UnsupportedPayloadError",
    "WebhookRequestError",
    "classify_payload",
    "parse_webhook_request",
    "verify_slack_signature",
]
