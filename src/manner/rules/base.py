"""The rule type shared by validators and conditions."""

from __future__ import annotations

import dataclasses
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from manner.debounce import debounce
from manner.exceptions import RuleDefinitionError
from manner.status import Status, StatusMap
from manner.types import FieldValues
from manner.utils import call

RuleCheck: TypeAlias = Callable[[FieldValues], Mapping[str, Status] | Awaitable[Mapping[str, Status]]]


def normalize_field_names(field_names: Iterable[str], *, what: str = "rule") -> tuple[str, ...]:
    """Return *field_names* as a tuple, rejecting empty or non-string names."""
    if isinstance(field_names, str):
        raise RuleDefinitionError(f"{what} field names must be a sequence of strings, not a single string")
    names = tuple(field_names)
    if not names:
        raise RuleDefinitionError(f"{what} must name at least one field")
    for name in names:
        if not isinstance(name, str) or not name:
            raise RuleDefinitionError(f"{what} field names must be non-empty strings, got {name!r}")
    return names


@dataclass(frozen=True, eq=False)
class Rule:
    """Fields bound to an asynchronous check producing per-field statuses.

    ``field_names`` are the inputs sliced from the model; ``outputs`` are the
    fields the rule may report on (the inputs unless given). Duplicates are
    kept as declared. Rules compare by identity.
    """

    field_names: tuple[str, ...]
    check: RuleCheck
    name: str = ""
    outputs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_names", normalize_field_names(self.field_names))
        if not callable(self.check):
            raise RuleDefinitionError(f"rule check must be callable, got {type(self.check).__name__}")
        outputs = normalize_field_names(self.outputs, what="rule outputs") if self.outputs else self.field_names
        object.__setattr__(self, "outputs", outputs)

    @property
    def label(self) -> str:
        return self.name or ",".join(self.field_names)

    async def evaluate(self, values: FieldValues) -> StatusMap:
        """Run the check; fields missing from the result mean no opinion."""
        result = await call(self.check, values)
        if not isinstance(result, Mapping):
            raise TypeError(f"rule {self.label!r} returned {type(result).__name__}, expected a mapping")
        return dict(result)

    def debounced(self, ms: float) -> Rule:
        """Return a copy of this rule whose check waits *ms* milliseconds first."""
        if ms == 0:
            return self
        return dataclasses.replace(self, check=debounce(ms, self.check))


def slice_values(model: Mapping[str, Any], field_names: Iterable[str]) -> dict[str, Any]:
    """Pick *field_names* out of *model*; absent fields read as ``None``."""
    return {name: model.get(name) for name in field_names}
