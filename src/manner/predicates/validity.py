"""Status-returning predicates.

A predicate judges a value and returns a ``ValidityStatus``: ``valid``, or
``invalid`` with a message rendered later against a locale bundle::

    from manner.predicates import validity as P

    P.equal("hello")("nope")  # => invalid, renders 'Must be "hello"'

Predicates may be synchronous or return awaitables; the combinators here
accept both.
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

from manner.constants.status import VALID
from manner.exceptions import RuleDefinitionError
from manner.i18n.messages import PredicateMessage, i18n_message
from manner.predicates import boolean as B
from manner.status import Status, ValidityStatus
from manner.types import Bundle
from manner.utils import call

Predicate: TypeAlias = Callable[..., Any]
PredicateFactory: TypeAlias = Callable[..., Predicate]


def _bound_message(msgf: PredicateMessage, args: Sequence[Any], rest: Sequence[Any]) -> Callable[[Bundle], str]:
    return lambda bundle: msgf(bundle, args, rest)


def _as_status(result: Any) -> Status:
    """Accept plain booleans from predicates alongside statuses."""
    if isinstance(result, Status):
        return result
    if isinstance(result, bool):
        return ValidityStatus.valid() if result else ValidityStatus.invalid()
    raise TypeError(f"predicate returned {type(result).__name__}, expected a Status or bool")


def predicate(factory: Callable[..., Callable[..., bool]], msgf: PredicateMessage) -> PredicateFactory:
    """Lift a boolean factory into a factory of status predicates.

    The factory is invoked with its arguments right away, so a factory that
    does not produce a callable fails when the rule is declared.
    """
    if not callable(factory):
        raise RuleDefinitionError(f"predicate factory must be callable, got {type(factory).__name__}")

    def bind(*args: Any) -> Predicate:
        check = factory(*args)
        if not callable(check):
            raise RuleDefinitionError(f"Expected a function from {factory!r}, got {check!r}")

        def run(*rest: Any) -> Status:
            if check(*rest):
                return ValidityStatus.valid()
            return ValidityStatus.invalid(_bound_message(msgf, args, rest))

        run.__name__ = getattr(factory, "__name__", "predicate")
        return run

    bind.__name__ = getattr(factory, "__name__", "predicate")
    return bind


def and_(*predicates: Predicate) -> Predicate:
    """All predicates must pass; the first failure in declaration order wins."""

    async def run(value: Any) -> Status:
        results = await asyncio.gather(*(call(p, value) for p in predicates))
        return ValidityStatus.combine(*(_as_status(result) for result in results))

    return run


def or_(*predicates: Predicate) -> Predicate:
    """Any predicate passing is enough; otherwise report the first failure."""

    async def run(value: Any) -> Status:
        results = [_as_status(result) for result in await asyncio.gather(*(call(p, value) for p in predicates))]
        if any(result.is_kind(VALID) for result in results):
            return ValidityStatus.valid()
        return ValidityStatus.combine(*results)

    return run


def message(msg: str | PredicateMessage, factory: PredicateFactory, *partial_args: Any) -> PredicateFactory:
    """Give the predicates built by *factory* a custom failure message.

    *msg* is either a plain string or a function taking the bundle, the
    predicate's arguments and the values it was called with.
    """
    if isinstance(msg, str):
        text = msg

        def msgf(bundle: Bundle, args: Sequence[Any], rest: Sequence[Any]) -> str:
            return text

    elif callable(msg):
        msgf = msg
    else:
        raise RuleDefinitionError(f"message must be a string or a callable, got {type(msg).__name__}")

    def bind(*args: Any) -> Predicate:
        all_args = partial_args + args
        inner = factory(*all_args)
        if not callable(inner):
            raise RuleDefinitionError(f"Expected a function from {factory!r}, got {inner!r}")

        async def run(*rest: Any) -> Status:
            result = _as_status(await call(inner, *rest))
            if result.is_kind(VALID):
                return ValidityStatus.valid()
            return ValidityStatus.invalid(_bound_message(msgf, all_args, rest))

        return run

    return bind


_msg = functools.partial(i18n_message, "predicates")

truthy = predicate(B.truthy, _msg("truthy"))
falsy = predicate(B.falsy, _msg("falsy"))
equal = predicate(B.equal, _msg("equal"))
equal_to = equal
not_equal = predicate(B.not_equal, _msg("not_equal"))
not_equal_to = not_equal
less_than = predicate(B.less_than, _msg("less_than"))
at_most = predicate(B.at_most, _msg("at_most"))
greater_than = predicate(B.greater_than, _msg("greater_than"))
at_least = predicate(B.at_least, _msg("at_least"))
between = predicate(B.between, _msg("between", lambda args, rest: {"a": args[0], "b": args[1]}))
empty = predicate(B.empty, _msg("empty", lambda args, rest: {"value": rest[0]}))
not_empty = predicate(B.not_empty, _msg("not_empty"))
not_null = predicate(B.not_null, _msg("not_null"))
length_of = predicate(B.length_of, _msg("length_of"))
length_at_least = predicate(B.length_at_least, _msg("length_at_least"))
length_at_most = predicate(B.length_at_most, _msg("length_at_most"))
element_of = predicate(
    B.element_of,
    _msg("element_of", lambda args, rest: {"value": ", ".join(str(item) for item in args[0])}),
)
numeric = predicate(lambda: B.all_of(B.type_of(str, int), B.regex(r"^\d*$")), _msg("numeric"))
checked = predicate(functools.partial(B.equal, True), _msg("checked"))
unchecked = predicate(functools.partial(B.equal, False), _msg("unchecked"))
all_equal = predicate(B.all_equal, _msg("all_equal"))
