"""Binding predicates to model fields.

A predicate on its own only judges values; binding it to field names turns
it into a ``Rule`` that can take part in a rule set::

    from manner.predicates import validity as P
    from manner.rules import bind_single

    rule = bind_single("greeting", P.equal("hello"))
    await rule.evaluate({"greeting": "nope"})
    # => {"greeting": ValidityStatus(kind="invalid", ...)}

A passing predicate yields an empty mapping: the rule has no opinion on the
field, which the rule set treats differently from an explicit ``valid``
(see ``RuleSet.evaluate``).
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Callable, Iterable
from typing import Any

from manner.constants.status import INVALID
from manner.exceptions import RuleDefinitionError
from manner.rules.base import Rule, normalize_field_names
from manner.status import Status, StatusMap, ValidityStatus
from manner.types import FieldValues
from manner.utils import call


def _failure(result: Any, label: str) -> Status | None:
    """Interpret a predicate result, returning the failure status or ``None``."""
    if isinstance(result, Status):
        return result if result.is_kind(INVALID) else None
    if isinstance(result, bool):
        return None if result else ValidityStatus.invalid()
    raise TypeError(f"predicate for {label!r} returned {type(result).__name__}, expected a Status or bool")


def _describe(predicate: Callable[..., Any], field_names: tuple[str, ...]) -> str:
    predicate_name = getattr(predicate, "__name__", type(predicate).__name__)
    return f"{predicate_name}({', '.join(field_names)})"


def bind_many(field_names: Iterable[str], predicate: Callable[..., Any], *, name: str = "") -> Rule:
    """Bind *predicate* to several fields, passed positionally in order.

    On failure every listed field is mapped to the same failure status.
    """
    names = normalize_field_names(field_names)
    if not callable(predicate):
        raise RuleDefinitionError(f"predicate for {list(names)} must be callable, got {type(predicate).__name__}")
    label = name or _describe(predicate, names)

    async def check(values: FieldValues) -> StatusMap:
        result = await call(predicate, *(values.get(field_name) for field_name in names))
        failure = _failure(result, label)
        if failure is None:
            return {}
        return {field_name: failure for field_name in names}

    return Rule(names, check, label)


def bind_single(field_name: str, predicate: Callable[..., Any], *, name: str = "") -> Rule:
    """Bind *predicate* to the value of a single field."""
    if not isinstance(field_name, str) or not field_name:
        raise RuleDefinitionError(f"field name must be a non-empty string, got {field_name!r}")
    return bind_many((field_name,), predicate, name=name)


def any_of(*rules: Rule, name: str = "") -> Rule:
    """Combine rules with logical OR.

    All children run concurrently. If any child reports nothing the combined
    rule reports nothing; otherwise the children's failures are merged, the
    last child winning for a field reported twice.
    """
    if not rules:
        raise RuleDefinitionError("any_of needs at least one rule")
    for rule in rules:
        if not isinstance(rule, Rule):
            raise RuleDefinitionError(f"any_of expects rules, got {type(rule).__name__}")

    async def check(values: FieldValues) -> StatusMap:
        results = await asyncio.gather(*(rule.evaluate(values) for rule in rules))
        if any(not result for result in results):
            return {}
        merged: StatusMap = {}
        for result in results:
            merged.update(result)
        return merged

    return Rule(
        tuple(itertools.chain.from_iterable(rule.field_names for rule in rules)),
        check,
        name or f"any({'; '.join(rule.label for rule in rules)})",
        tuple(itertools.chain.from_iterable(rule.outputs for rule in rules)),
    )
