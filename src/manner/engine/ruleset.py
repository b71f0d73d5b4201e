"""Rule sets: evaluate an ordered collection of rules against a model."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from manner.engine.cache import EvaluationCache, ResultCallback
from manner.exceptions import RuleDefinitionError
from manner.rules.base import Rule, slice_values
from manner.status import CONDITION, VALIDITY, Domain, StatusMap, get_domain

logger = logging.getLogger(__name__)


def _unique(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(names))


class RuleSet:
    """Ordered rules of one status domain sharing an evaluation cache.

    A rule's id in the cache is the set paired with the rule's position, so
    several sets can share one cache without their entries colliding.
    Declaration order only breaks ties when merging; rules themselves run
    concurrently.
    """

    def __init__(
        self,
        rules: Iterable[Rule],
        domain: Domain | str = VALIDITY,
        *,
        cache: EvaluationCache | None = None,
        fill_missing: bool = False,
    ) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)
        for rule in self._rules:
            if not isinstance(rule, Rule):
                raise RuleDefinitionError(f"rule sets hold rules, got {type(rule).__name__}")
        self._domain = get_domain(domain) if isinstance(domain, str) else domain
        self._cache = cache if cache is not None else EvaluationCache()
        self._fill_missing = fill_missing
        self._field_names = _unique(name for rule in self._rules for name in rule.field_names)
        self._output_names = _unique(name for rule in self._rules for name in rule.outputs)

    def __repr__(self) -> str:
        return f"RuleSet({self._domain.name}, {len(self._rules)} rules)"

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def cache(self) -> EvaluationCache:
        return self._cache

    @property
    def field_names(self) -> tuple[str, ...]:
        """Model fields read by any rule, deduplicated in first-seen order."""
        return self._field_names

    @property
    def output_names(self) -> tuple[str, ...]:
        """Fields any rule may report a status for."""
        return self._output_names

    def rule_id(self, index: int) -> tuple[RuleSet, int]:
        """Cache key of the rule at *index*."""
        return (self, index)

    async def evaluate(
        self,
        model: Mapping[str, Any],
        on_partial_result: ResultCallback | None = None,
    ) -> StatusMap:
        """Evaluate every rule against *model* and merge their statuses.

        Each rule only sees its own slice of the model. ``on_partial_result``
        receives each rule's status map as that rule settles. Statuses
        proposed for the same field are combined by the domain's priority
        order. A field no rule reports on is absent, unless the set was built
        with ``fill_missing`` in which case every output field is present and
        defaults to the domain's neutral status.
        """
        logger.debug("Evaluating %d %s rules", len(self._rules), self._domain.name)
        pending = [
            asyncio.ensure_future(
                self._cache.update(self.rule_id(index), rule, slice_values(model, rule.field_names), on_partial_result)
            )
            for index, rule in enumerate(self._rules)
        ]
        try:
            results = await asyncio.gather(*pending)
        except BaseException:
            # The first failure wins; stop waiting on the other rules.
            for future in pending:
                future.cancel()
            raise

        merged = self._domain.merge(results)
        if self._fill_missing:
            for field_name in self._output_names:
                if field_name not in merged:
                    merged[field_name] = self._domain.neutral()
        return merged

    def close(self) -> None:
        """Cancel this set's pending evaluations at the end of a session."""
        for index in range(len(self._rules)):
            self._cache.cancel(self.rule_id(index))


def validators(*rules: Rule, cache: EvaluationCache | None = None, fill_missing: bool = False) -> RuleSet:
    """Build a validity rule set."""
    return RuleSet(rules, VALIDITY, cache=cache, fill_missing=fill_missing)


def conditions(*rules: Rule, cache: EvaluationCache | None = None, fill_missing: bool = False) -> RuleSet:
    """Build a condition rule set."""
    return RuleSet(rules, CONDITION, cache=cache, fill_missing=fill_missing)
