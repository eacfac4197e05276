"""Router principal do Slack — agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.slack.webhook import router as webhook_router

router = APIRouter()

# Events API (handshake + envelopes)
router.include_router(webhook_router)
