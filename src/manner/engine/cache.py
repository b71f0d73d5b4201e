"""Evaluation cache: per-rule memoization with cancellation of stale work.

Each rule id owns one entry holding the last input, the result produced for
it, and at most one pending evaluation (an ``asyncio.Task``). Submitting a
new input always cancels the pending evaluation first, so the latest input
wins. An input equal to the cached one is answered from the cache without
running the rule.

All bookkeeping in ``update`` runs synchronously, before the caller's first
suspension point, so one cache must be driven from a single event loop.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Hashable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from manner.rules.base import Rule
from manner.status import StatusMap
from manner.types import EntryState
from manner.utils import same_values

logger = logging.getLogger(__name__)

ResultCallback: TypeAlias = Callable[[StatusMap], object]


@dataclass(slots=True)
class _CacheEntry:
    """Cache state for one rule id; input and result are replaced together."""

    last_input: dict[str, Any] | None = None
    last_result: StatusMap | None = None
    in_flight: asyncio.Task[StatusMap] | None = None

    @property
    def has_result(self) -> bool:
        return self.last_result is not None


def _completed(result: StatusMap) -> asyncio.Future[StatusMap]:
    future: asyncio.Future[StatusMap] = asyncio.get_running_loop().create_future()
    future.set_result(result)
    return future


def _retrieve_exception(task: asyncio.Task[StatusMap]) -> None:
    # Failures reach callers through _settle; awaiters that gave up must not leave them unretrieved.
    if not task.cancelled():
        task.exception()


class EvaluationCache:
    """Owns the cache-entry table for one evaluation session."""

    def __init__(self) -> None:
        self._entries: dict[Hashable, _CacheEntry] = {}

    def __len__(self) -> int:
        """Number of rule ids with a cached result."""
        return sum(1 for entry in self._entries.values() if entry.has_result)

    def state(self, rule_id: Hashable) -> EntryState:
        entry = self._entries.get(rule_id)
        if entry is None:
            return "empty"
        if entry.in_flight is not None:
            return "pending"
        return "cached" if entry.has_result else "empty"

    def cached_result(self, rule_id: Hashable) -> StatusMap | None:
        """Return a copy of the cached result for *rule_id*, if any."""
        entry = self._entries.get(rule_id)
        if entry is None or entry.last_result is None:
            return None
        return dict(entry.last_result)

    def update(
        self,
        rule_id: Hashable,
        rule: Rule,
        values: Mapping[str, Any],
        on_result: ResultCallback | None = None,
    ) -> Awaitable[StatusMap]:
        """Bring *rule_id* up to date for *values*.

        Must be called from a running event loop. Returns an awaitable that
        resolves to the rule's status map. When the evaluation started here is
        superseded by a later ``update``, the awaitable follows the newer
        evaluation instead of failing. ``on_result`` is called with the result
        of a real evaluation as soon as it settles; cache hits do not call it.
        Failures raised by the rule propagate through the awaitable and leave
        the entry untouched.
        """
        entry = self._entries.setdefault(rule_id, _CacheEntry())
        self._cancel_pending(rule_id, entry)

        snapshot = dict(values)
        if entry.last_result is not None and same_values(snapshot, entry.last_input):
            logger.debug("Cache hit for rule %s (%s)", rule_id, rule.label)
            return _completed(dict(entry.last_result))

        task = asyncio.get_running_loop().create_task(
            self._run(rule_id, rule, snapshot, on_result),
            name=f"manner-rule-{rule_id}",
        )
        task.add_done_callback(_retrieve_exception)
        entry.in_flight = task
        return self._settle(rule_id, task)

    def discard(self, rule_id: Hashable) -> None:
        """Cancel pending work for *rule_id* and forget its cached result."""
        entry = self._entries.pop(rule_id, None)
        if entry is not None:
            self._cancel_pending(rule_id, entry)

    def cancel(self, rule_id: Hashable) -> None:
        """Cancel pending work for *rule_id*; its cached result is kept."""
        entry = self._entries.get(rule_id)
        if entry is not None:
            self._cancel_pending(rule_id, entry)

    def cancel_all(self) -> None:
        """Cancel every pending evaluation; cached results are kept."""
        for rule_id, entry in self._entries.items():
            self._cancel_pending(rule_id, entry)

    @staticmethod
    def _cancel_pending(rule_id: Hashable, entry: _CacheEntry) -> None:
        task = entry.in_flight
        if task is None:
            return
        entry.in_flight = None
        if not task.done():
            task.cancel()
            logger.debug("Cancelled pending evaluation for rule %s", rule_id)

    def _release(self, rule_id: Hashable, task: asyncio.Task[StatusMap] | None) -> _CacheEntry | None:
        """Clear *task* as the pending evaluation, returning the entry it still owns."""
        entry = self._entries.get(rule_id)
        if entry is None or task is None or entry.in_flight is not task:
            return None
        entry.in_flight = None
        return entry

    async def _run(
        self,
        rule_id: Hashable,
        rule: Rule,
        values: dict[str, Any],
        on_result: ResultCallback | None,
    ) -> StatusMap:
        task = asyncio.current_task()
        try:
            result = await rule.evaluate(values)
        except asyncio.CancelledError:
            self._release(rule_id, task)
            raise
        except Exception:
            logger.debug("Evaluation failed for rule %s (%s)", rule_id, rule.label, exc_info=True)
            self._release(rule_id, task)
            raise

        entry = self._release(rule_id, task)
        if entry is None:
            # Superseded, but the rule ignored the cancellation request.
            logger.debug("Discarding stale result for rule %s (%s)", rule_id, rule.label)
            raise asyncio.CancelledError

        entry.last_input = values
        entry.last_result = result
        if on_result is not None:
            on_result(dict(result))
        return result

    async def _settle(self, rule_id: Hashable, task: asyncio.Task[StatusMap]) -> StatusMap:
        """Wait for *task*, following newer evaluations of the same rule."""
        while True:
            await asyncio.wait((task,))
            if not task.cancelled():
                return dict(task.result())

            entry = self._entries.get(rule_id)
            if entry is None:
                return {}
            newer = entry.in_flight
            if newer is not None and newer is not task:
                task = newer
                continue
            if newer is task:
                entry.in_flight = None
            return dict(entry.last_result) if entry.last_result is not None else {}
