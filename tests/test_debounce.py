"""Tests for the debounce wrapper."""

from __future__ import annotations

import asyncio

import pytest

from manner.debounce import debounce
from manner.exceptions import RuleDefinitionError


@pytest.mark.asyncio
async def test_debounced_call_runs_after_delay() -> None:
    calls: list[int] = []

    def record(value: int) -> int:
        calls.append(value)
        return value * 2

    wrapped = debounce(10, record)

    assert await wrapped(21) == 42
    assert calls == [21]


@pytest.mark.asyncio
async def test_debounce_awaits_async_functions() -> None:
    async def double(value: int) -> int:
        await asyncio.sleep(0)
        return value * 2

    assert await debounce(1, double)(5) == 10


@pytest.mark.asyncio
async def test_cancel_before_delay_never_calls_function() -> None:
    calls: list[str] = []
    wrapped = debounce(100, lambda: calls.append("called"))

    task = asyncio.ensure_future(wrapped())
    await asyncio.sleep(0.01)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    await asyncio.sleep(0.12)
    assert calls == []


@pytest.mark.asyncio
async def test_zero_delay_still_yields() -> None:
    assert await debounce(0, lambda: "ok")() == "ok"


def test_debounce_rejects_negative_delay() -> None:
    with pytest.raises(RuleDefinitionError, match="delay"):
        debounce(-1, lambda: None)


def test_debounce_rejects_non_callable() -> None:
    with pytest.raises(RuleDefinitionError, match="callable"):
        debounce(10, "not a function")  # type: ignore[arg-type]
