"""Cancellable delay-then-call wrapper for evaluation functions."""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from manner.exceptions import RuleDefinitionError
from manner.utils import call

T = TypeVar("T")


def debounce(ms: float, fn: Callable[..., T | Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Wrap *fn* so every call first waits *ms* milliseconds.

    The wait is an ``asyncio.sleep``: cancelling the task running the wrapper
    before the delay elapses clears the timer and *fn* is never called.
    """
    if not callable(fn):
        raise RuleDefinitionError(f"debounce expects a callable, got {type(fn).__name__}")
    if isinstance(ms, bool) or not isinstance(ms, (int, float)) or ms < 0:
        raise RuleDefinitionError(f"debounce delay must be a non-negative number of milliseconds, got {ms!r}")
    seconds = ms / 1000

    @functools.wraps(fn)
    async def debounced(*args: Any, **kwargs: Any) -> T:
        await asyncio.sleep(seconds)
        return await call(fn, *args, **kwargs)

    return debounced
