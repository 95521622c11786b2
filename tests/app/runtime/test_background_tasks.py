"""Testes para BackgroundTaskRunner."""

from __future__ import annotations

import asyncio

import pytest

from app.runtime import BackgroundTaskRunner


@pytest.mark.asyncio
async def test_schedule_runs_coroutine_and_cleans_active_set() -> None:
    runner = BackgroundTaskRunner()
    event = asyncio.Event()

    async def _work() -> None:
        event.set()

    active = runner.schedule("work", _work())

    assert active == 1
    await runner.join()
    assert event.is_set()
    assert runner.active_count == 0


@pytest.mark.asyncio
async def test_failed_task_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    runner = BackgroundTaskRunner()

    async def _boom() -> None:
        raise RuntimeError("boom")

    with caplog.at_level("ERROR"):
        runner.schedule("boom", _boom())
        await runner.join()

    assert "background_task_failed" in caplog.text
    assert runner.active_count == 0


@pytest.mark.asyncio
async def test_join_waits_for_tasks_scheduled_by_other_tasks() -> None:
    runner = BackgroundTaskRunner()
    order: list[str] = []

    async def _child() -> None:
        order.append("child")

    async def _parent() -> None:
        order.append("parent")
        runner.schedule("child", _child())

    runner.schedule("parent", _parent())
    await runner.join()

    assert order == ["parent", "child"]


@pytest.mark.asyncio
async def test_concurrency_is_bounded() -> None:
    runner = BackgroundTaskRunner(max_concurrency=2)
    running = 0
    peak = 0

    async def _work() -> None:
        nonlocal running, peak
        running += 1
        peak = max(peak, running)
        await asyncio.sleep(0.01)
        running -= 1

    for index in range(6):
        runner.schedule(f"work-{index}", _work())
    await runner.join()

    assert peak == 2


@pytest.mark.asyncio
async def test_drain_returns_immediately_when_empty() -> None:
    runner = BackgroundTaskRunner()
    await runner.drain(timeout_seconds=0.01)
    assert runner.active_count == 0


@pytest.mark.asyncio
async def test_drain_cancels_tasks_after_timeout(caplog: pytest.LogCaptureFixture) -> None:
    runner = BackgroundTaskRunner()

    async def _slow() -> None:
        await asyncio.sleep(10)

    runner.schedule("slow", _slow())
    with caplog.at_level("WARNING"):
        await runner.drain(timeout_seconds=0.01)

    assert "background_tasks_shutdown_cancelled" in caplog.text
    assert runner.active_count == 0
    assert "background_task_failed" not in caplog.text
