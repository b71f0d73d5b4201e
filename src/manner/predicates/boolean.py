"""Boolean predicate factories.

Every factory takes its parameters and returns a ``value -> bool`` check.
Checks never raise for odd input: values that cannot be compared, or that
have no length, simply fail.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

Check: TypeAlias = Callable[[Any], bool]


def _compare(op: Callable[[Any, Any], bool], expected: Any) -> Check:
    def check(value: Any) -> bool:
        if value is None:
            return False
        try:
            return bool(op(value, expected))
        except TypeError:
            return False

    return check


def _length(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return len(value)
    except TypeError:
        return None


def truthy() -> Check:
    return bool


def falsy() -> Check:
    return operator.not_


def equal(expected: Any) -> Check:
    return lambda value: value == expected


def not_equal(expected: Any) -> Check:
    return lambda value: value != expected


def less_than(expected: Any) -> Check:
    return _compare(operator.lt, expected)


def at_most(expected: Any) -> Check:
    return _compare(operator.le, expected)


def greater_than(expected: Any) -> Check:
    return _compare(operator.gt, expected)


def at_least(expected: Any) -> Check:
    return _compare(operator.ge, expected)


def between(low: Any, high: Any) -> Check:
    """Between *low* and *high*, inclusively."""
    above, below = at_least(low), at_most(high)
    return lambda value: above(value) and below(value)


def empty() -> Check:
    """``None`` or of length zero."""
    return lambda value: value is None or _length(value) == 0


def not_empty() -> Check:
    """Not ``None`` and of non-zero length."""

    def check(value: Any) -> bool:
        length = _length(value)
        return length is not None and length > 0

    return check


def not_null() -> Check:
    return lambda value: value is not None


def length_of(n: int) -> Check:
    return lambda value: _length(value) == n


def length_at_least(n: int) -> Check:
    def check(value: Any) -> bool:
        length = _length(value)
        return length is not None and length >= n

    return check


def length_at_most(n: int) -> Check:
    def check(value: Any) -> bool:
        length = _length(value)
        return length is not None and length <= n

    return check


def element_of(expected: Iterable[Any]) -> Check:
    members = tuple(expected)
    return lambda value: value in members


def type_of(*types: type) -> Check:
    return lambda value: isinstance(value, types)


def regex(pattern: str | re.Pattern[str], flags: int = 0) -> Check:
    """Match *pattern* anywhere in a string (numbers are matched by their text)."""
    compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern

    def check(value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return False
        return compiled.search(str(value)) is not None

    return check


def all_equal() -> Callable[..., bool]:
    """All positional values are equal to each other."""
    return lambda *values: all(value == values[0] for value in values[1:])


def all_of(*checks: Check) -> Check:
    return lambda value: all(check(value) for check in checks)


def any_of(*checks: Check) -> Check:
    return lambda value: any(check(value) for check in checks)
