"""Controle de tasks assíncronas destacadas do loop de decodificação.

Persistência e notificações rodam fora do loop que roteia frames: quem
agenda não espera nem observa o resultado. Falhas são logadas pelo
callback de término. `join()` existe para testes aguardarem de forma
determinística; `drain()` é usado no shutdown do processo.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 100


class BackgroundTaskRunner:
    """Agenda coroutines como tasks com limite de concorrência."""

    def __init__(self, max_concurrency: int = DEFAULT_MAX_CONCURRENCY) -> None:
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._active_tasks: set[asyncio.Task[Any]] = set()

    @property
    def active_count(self) -> int:
        return len(self._active_tasks)

    def schedule(self, name: str, coroutine: Coroutine[Any, Any, None]) -> int:
        """Agenda task destacada. Requer event loop em execução.

        Returns:
            Quantidade de tasks ativas após o agendamento.
        """
        task = asyncio.create_task(self._run_with_limit(coroutine), name=name)
        self._active_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        logger.debug(
            "background_task_scheduled",
            extra={"task_name": name, "active_tasks": len(self._active_tasks)},
        )
        return len(self._active_tasks)

    async def _run_with_limit(self, coroutine: Coroutine[Any, Any, None]) -> None:
        async with self._semaphore:
            await coroutine

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._active_tasks.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "background_task_failed",
                    extra={
                        "task_name": task.get_name(),
                        "error_type": type(exc).__name__,
                        "error": str(exc),
                        "active_tasks": len(self._active_tasks),
                    },
                )

    async def join(self) -> None:
        """Aguarda todas as tasks, inclusive as agendadas durante a espera."""
        while self._active_tasks:
            await asyncio.gather(*list(self._active_tasks), return_exceptions=True)

    async def drain(self, timeout_seconds: float = 30.0) -> None:
        """Aguarda tasks pendentes no shutdown; cancela o que exceder o timeout."""
        if not self._active_tasks:
            return

        pending_now = list(self._active_tasks)
        logger.info(
            "background_tasks_shutdown_wait",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            "background_tasks_shutdown_cancelled",
            extra={"cancelled_tasks": len(pending)},
        )
