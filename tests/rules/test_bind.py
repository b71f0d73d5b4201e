"""Tests for binding predicates to fields."""

from __future__ import annotations

import asyncio

import pytest

from manner.exceptions import RuleDefinitionError
from manner.predicates import validity as P
from manner.rules import Rule, any_of, bind_many, bind_single, slice_values
from manner.status import ValidityStatus


@pytest.mark.asyncio
async def test_bind_single_reports_failure_on_field(kinds) -> None:
    rule = bind_single("greeting", P.equal("hello"))

    assert kinds(await rule.evaluate({"greeting": "nope"})) == {"greeting": "invalid"}


@pytest.mark.asyncio
async def test_bind_single_passing_predicate_has_no_opinion() -> None:
    rule = bind_single("greeting", P.equal("hello"))

    assert await rule.evaluate({"greeting": "hello"}) == {}


@pytest.mark.asyncio
async def test_bind_many_fans_one_failure_out_to_every_field() -> None:
    rule = bind_many(["password", "confirmation"], P.all_equal())

    result = await rule.evaluate({"password": "a", "confirmation": "b"})

    assert set(result) == {"password", "confirmation"}
    assert result["password"] is result["confirmation"]


@pytest.mark.asyncio
async def test_bind_many_passes_values_in_declared_order() -> None:
    seen: list[tuple[object, ...]] = []

    def record(*values: object) -> bool:
        seen.append(values)
        return True

    rule = bind_many(["b", "a"], record)
    await rule.evaluate({"a": 1, "b": 2})

    assert seen == [(2, 1)]


@pytest.mark.asyncio
async def test_bind_accepts_boolean_and_async_predicates(kinds) -> None:
    async def is_even(value: int) -> bool:
        await asyncio.sleep(0)
        return value % 2 == 0

    rule = bind_single("n", is_even)

    assert await rule.evaluate({"n": 2}) == {}
    assert kinds(await rule.evaluate({"n": 3})) == {"n": "invalid"}


@pytest.mark.asyncio
async def test_predicate_returning_garbage_raises_type_error() -> None:
    rule = bind_single("n", lambda value: "yes")

    with pytest.raises(TypeError, match="expected a Status or bool"):
        await rule.evaluate({"n": 1})


def test_bind_rejects_empty_field_list() -> None:
    with pytest.raises(RuleDefinitionError, match="at least one field"):
        bind_many([], P.truthy())


def test_bind_rejects_non_callable_predicate() -> None:
    with pytest.raises(RuleDefinitionError, match="callable"):
        bind_single("a", None)  # type: ignore[arg-type]


def test_bind_many_rejects_single_string() -> None:
    with pytest.raises(RuleDefinitionError, match="single string"):
        bind_many("abc", P.truthy())


@pytest.mark.asyncio
async def test_any_of_reports_nothing_when_one_child_passes() -> None:
    rule = any_of(bind_single("email", P.not_empty()), bind_single("phone", P.not_empty()))

    assert await rule.evaluate({"email": "", "phone": "555"}) == {}


@pytest.mark.asyncio
async def test_any_of_merges_failures_when_all_children_fail(kinds) -> None:
    rule = any_of(bind_single("email", P.not_empty()), bind_single("phone", P.not_empty()))

    result = await rule.evaluate({"email": "", "phone": None})

    assert kinds(result) == {"email": "invalid", "phone": "invalid"}
    assert rule.field_names == ("email", "phone")


@pytest.mark.asyncio
async def test_any_of_later_child_wins_for_shared_field() -> None:
    first = Rule(("a",), lambda values: {"a": ValidityStatus.invalid("first")})
    second = Rule(("a",), lambda values: {"a": ValidityStatus.invalid("second")})

    result = await any_of(first, second).evaluate({"a": 1})

    assert result["a"].render({}) == "second"


def test_any_of_requires_rules() -> None:
    with pytest.raises(RuleDefinitionError):
        any_of()


def test_slice_values_reads_missing_fields_as_none() -> None:
    assert slice_values({"a": 1, "c": 3}, ["a", "b"]) == {"a": 1, "b": None}


@pytest.mark.asyncio
async def test_rule_rejects_non_mapping_result() -> None:
    rule = Rule(("a",), lambda values: ["a"])

    with pytest.raises(TypeError, match="expected a mapping"):
        await rule.evaluate({"a": 1})


def test_debounced_zero_returns_same_rule() -> None:
    rule = bind_single("a", P.truthy())

    assert rule.debounced(0) is rule
    assert rule.debounced(5) is not rule
    assert rule.debounced(5).field_names == rule.field_names
