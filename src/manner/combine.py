"""Priority-based combination of statuses.

The combiner does not know about any particular domain: callers pass the
dominance order (most dominant first) and the neutral status.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from manner.exceptions import StatusKindError

if TYPE_CHECKING:
    from manner.status import Status


def _rank(ranks: Mapping[str, int], status: Status) -> int:
    rank = ranks.get(status.kind)
    if rank is None:
        raise StatusKindError(f"status kind {status.kind!r} is not in priority order {list(ranks)}")
    return rank


def combine_with_priority(priority: Sequence[str], neutral: Status, *statuses: Status) -> Status:
    """Combine statuses into the single most dominant one.

    The first status of the most dominant kind short-circuits the scan.
    Otherwise the first status strictly more dominant than everything before
    it wins, starting from *neutral*; when nothing beats *neutral* (no
    statuses, or only statuses of the neutral kind) *neutral* is returned.
    """
    if not priority:
        raise StatusKindError("priority order must not be empty")
    ranks = {kind: index for index, kind in enumerate(priority)}

    best = neutral
    best_rank = _rank(ranks, neutral)
    for status in statuses:
        rank = _rank(ranks, status)
        if rank == 0:
            return status
        if rank < best_rank:
            best = status
            best_rank = rank
    return best


def merge_with_priority(
    priority: Sequence[str],
    neutral: Status,
    maps: Iterable[Mapping[str, Status]],
) -> dict[str, Status]:
    """Merge per-field status maps, combining every status proposed for a field.

    Fields keep the order of their first appearance. Fields no map mentions
    are absent from the result.
    """
    proposals: dict[str, list[Status]] = {}
    for mapping in maps:
        for field_name, status in mapping.items():
            proposals.setdefault(field_name, []).append(status)
    return {
        field_name: combine_with_priority(priority, neutral, *statuses)
        for field_name, statuses in proposals.items()
    }
