"""Helpers for code that accepts both plain and awaitable results."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any


async def resolve(value: Any) -> Any:
    """Await *value* when it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


async def call(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call *fn* and await its result if it returned an awaitable."""
    return await resolve(fn(*args, **kwargs))
