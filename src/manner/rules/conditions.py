"""Conditions: enabling, disabling and hiding fields based on a bound predicate.

A condition runs a validity rule once, reads "no failures" as success, and
lets each action turn that boolean into field statuses::

    from manner.predicates import validity as P
    from manner.rules import bind_single, disable, when

    rule = when(bind_single("has_wheels", P.equal(True)), disable("number_of_wheels"))

The predicate always dictates the outcome: when it passes, ``disable``
disables its fields, and when it fails the same action enables them.
Actions of one condition that disagree about a field are resolved by the
condition priority order (hidden over disabled over normal).
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from typing import TypeAlias
from dataclasses import dataclass

from manner.exceptions import RuleDefinitionError
from manner.rules.base import Rule, normalize_field_names
from manner.status import CONDITION, ConditionStatus, StatusMap, as_message
from manner.types import FieldValues, MessageFn

StatusFactory: TypeAlias = Callable[[MessageFn | None], ConditionStatus]


@dataclass(frozen=True)
class Action:
    """Maps the outcome of a condition's predicate onto a set of fields."""

    field_names: tuple[str, ...]
    on_success: StatusFactory
    on_failure: StatusFactory
    message: MessageFn | None = None

    def __call__(self, success: bool) -> StatusMap:
        make = self.on_success if success else self.on_failure
        return {field_name: make(self.message) for field_name in self.field_names}


def _define_action(
    field_names: Iterable[str],
    message: str | MessageFn | None,
    on_success: StatusFactory,
    on_failure: StatusFactory,
) -> Action:
    return Action(
        field_names=normalize_field_names(field_names, what="action"),
        on_success=on_success,
        on_failure=on_failure,
        message=as_message(message),
    )


def hide(*field_names: str, message: str | MessageFn | None = None) -> Action:
    """Hide the fields when the predicate passes, show them otherwise."""
    return _define_action(field_names, message, ConditionStatus.hidden, ConditionStatus.normal)


def show(*field_names: str, message: str | MessageFn | None = None) -> Action:
    """Show the fields when the predicate passes, hide them otherwise."""
    return _define_action(field_names, message, ConditionStatus.normal, ConditionStatus.hidden)


def disable(*field_names: str, message: str | MessageFn | None = None) -> Action:
    """Disable the fields when the predicate passes, enable them otherwise."""
    return _define_action(field_names, message, ConditionStatus.disabled, ConditionStatus.normal)


def enable(*field_names: str, message: str | MessageFn | None = None) -> Action:
    """Enable the fields when the predicate passes, disable them otherwise."""
    return _define_action(field_names, message, ConditionStatus.normal, ConditionStatus.disabled)


def when(rule: Rule, *actions: Action, name: str = "") -> Rule:
    """Build a condition rule from a bound predicate and its actions.

    The condition reads the predicate's fields; its outputs are the fields
    named by the actions.
    """
    if not isinstance(rule, Rule):
        raise RuleDefinitionError(f"when() expects a bound rule, got {type(rule).__name__}")
    if not actions:
        raise RuleDefinitionError("when() needs at least one action")
    for action in actions:
        if not isinstance(action, Action):
            raise RuleDefinitionError(
                f"when() actions must come from hide, show, disable or enable, got {type(action).__name__}"
            )

    async def check(values: FieldValues) -> StatusMap:
        success = not await rule.evaluate(values)
        return CONDITION.merge(action(success) for action in actions)

    outputs = tuple(itertools.chain.from_iterable(action.field_names for action in actions))
    return Rule(rule.field_names, check, name or f"when({rule.label})", outputs)
