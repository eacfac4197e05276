"""Montagem das rotas HTTP do serviço.

    /health, /ready            -> api.routes.health
    /webhook/slack/events      -> api.routes.slack
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.slack.router import router as slack_router

SLACK_WEBHOOK_PREFIX = "/webhook/slack"


def create_api_router() -> APIRouter:
    root = APIRouter()
    root.include_router(health_router, tags=["health"])
    root.include_router(slack_router, prefix=SLACK_WEBHOOK_PREFIX, tags=["slack"])
    return root
