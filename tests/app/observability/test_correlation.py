"""Testes do escopo de correlation_id."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import correlation_scope, get_correlation_id


def test_scope_uses_given_id_and_restores_previous() -> None:
    assert get_correlation_id() == ""
    with correlation_scope("req-1") as correlation_id:
        assert correlation_id == "req-1"
        with correlation_scope("req-2"):
            assert get_correlation_id() == "req-2"
        assert get_correlation_id() == "req-1"
    assert get_correlation_id() == ""


def test_scope_generates_id_when_missing() -> None:
    with correlation_scope(None) as first, correlation_scope("") as second:
        assert first
        assert second
        assert first != second


@pytest.mark.asyncio
async def test_detached_task_inherits_scope_id() -> None:
    seen: list[str] = []

    async def work() -> None:
        await asyncio.sleep(0)
        seen.append(get_correlation_id())

    with correlation_scope("frame-7"):
        task = asyncio.create_task(work())
    await task

    assert seen == ["frame-7"]
