"""Aplicação ASGI do Slack Mirror.

    uvicorn app.app:app --host 0.0.0.0 --port 8080

ou `slack-mirror` (entrypoint do pacote), que lê HOST/PORT do ambiente.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.slack.webhook_runtime import drain_background_tasks
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import close_async_redis_client, create_async_redis_client
from config.logging import get_logger
from config.settings import get_base_settings, get_id_map_settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

# logging precisa estar configurado antes dos módulos que logam no import
initialize_app()

logger = get_logger(__name__)

SHUTDOWN_DRAIN_SECONDS = 30.0


def _attach_redis(app: FastAPI) -> None:
    app.state.redis_client = None
    if get_id_map_settings().backend != "redis":
        return
    try:
        app.state.redis_client = create_async_redis_client()
    except ValueError as exc:
        # /ready reporta not_ready; o boot segue para expor o diagnóstico
        logger.warning("redis_client_not_ready", extra={"error": str(exc)})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: valida settings e abre o Redis do mapeamento.

    Shutdown: espera o espelhamento em background e fecha o Redis.
    """
    logger.info("app_starting", extra={"environment": get_base_settings().environment})
    validate_runtime_settings()
    _attach_redis(app)
    try:
        yield
    finally:
        logger.info("app_shutting_down")
        await drain_background_tasks(timeout_seconds=SHUTDOWN_DRAIN_SECONDS)
        app.state.redis_client = None
        await close_async_redis_client()


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title="Slack Mirror",
        description="Espelha mensagens de canais Slack em grupos Slashwork",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(create_api_router())
    return fastapi_app


app = create_app()


def main() -> None:
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info("app_serving", extra={"host": host, "port": port})
    uvicorn.run(
        "app.app:app",
        host=host,
        port=port,
        reload=get_base_settings().is_development,
        log_config=None,
    )


if __name__ == "__main__":
    main()
