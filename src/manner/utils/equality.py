"""Type-aware deep equality for cached inputs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def same_values(left: Any, right: Any) -> bool:
    """Deep equality that also requires equal types, so ``1``, ``1.0`` and ``True`` differ.

    Mappings are compared key by key regardless of order, lists and tuples
    element by element; anything else falls back to ``==``.
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, Mapping):
        return left.keys() == right.keys() and all(same_values(left[key], right[key]) for key in left)
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(same_values(a, b) for a, b in zip(left, right))
    return left == right
