"""Pool de tasks de espelhamento em background (modo async).

O ack ao Slack sai antes do espelhamento terminar; o pool limita quantas
mutações rodam ao mesmo tempo e segura o shutdown até elas acabarem.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

MAX_CONCURRENT_TASKS = 100
DEFAULT_DRAIN_TIMEOUT_SECONDS = 30.0


class ProcessingTaskPool:
    """Conjunto de tasks vivas + semáforo de concorrência."""

    def __init__(self, max_concurrent: int = MAX_CONCURRENT_TASKS) -> None:
        self._max_concurrent = max_concurrent
        self._semaphore: asyncio.Semaphore | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    def __len__(self) -> int:
        return len(self._tasks)

    def _limit(self) -> asyncio.Semaphore:
        # criado sob demanda para se ligar ao loop em execução
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self._max_concurrent)
        return self._semaphore

    async def _run(self, coroutine: Awaitable[None]) -> None:
        async with self._limit():
            await coroutine

    def _forget(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "webhook_processing_task_failed",
                extra={
                    "channel": "slack",
                    "error_type": type(exc).__name__,
                    "active_tasks": len(self._tasks),
                },
            )

    def submit(self, coroutine: Awaitable[None]) -> asyncio.Task[None]:
        task = asyncio.create_task(self._run(coroutine))
        self._tasks.add(task)
        task.add_done_callback(self._forget)
        return task

    async def drain(self, timeout_seconds: float) -> int:
        """Espera as tasks pendentes; cancela o que passar do timeout.

        Returns:
            Quantidade de tasks canceladas.
        """
        if not self._tasks:
            return 0
        logger.info(
            "webhook_processing_shutdown_wait",
            extra={
                "channel": "slack",
                "pending_tasks": len(self._tasks),
                "timeout_seconds": timeout_seconds,
            },
        )
        _, pending = await asyncio.wait(set(self._tasks), timeout=timeout_seconds)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            logger.warning(
                "webhook_processing_shutdown_cancelled",
                extra={"channel": "slack", "cancelled_tasks": len(pending)},
            )
        return len(pending)

    async def reset(self) -> None:
        """Cancela tudo e descarta o semáforo (uso em testes)."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
        self._semaphore = None


_pool = ProcessingTaskPool()


def active_task_count() -> int:
    return len(_pool)


def schedule_processing_task(*, correlation_id: str, coroutine: Awaitable[None]) -> int:
    """Agenda o espelhamento em background e retorna o total de tasks ativas."""
    _pool.submit(coroutine)
    logger.info(
        "webhook_processing_scheduled",
        extra={
            "channel": "slack",
            "correlation_id": correlation_id,
            "mode": "async",
            "active_tasks": len(_pool),
        },
    )
    return len(_pool)


async def drain_processing_tasks(
    timeout_seconds: float = DEFAULT_DRAIN_TIMEOUT_SECONDS,
) -> int:
    return await _pool.drain(timeout_seconds)
