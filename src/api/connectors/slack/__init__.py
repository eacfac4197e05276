"""Connector Slack (Events API): assinatura e webhook."""

from .signature import SignatureResult, verify_slack_signature

__all__ = ["SignatureResult", "verify_slack_signature"]
