"""Immutable field statuses and the two status domains.

A ``Status`` pairs a kind (``valid``/``invalid`` for validity, ``normal``/
``disabled``/``hidden`` for conditions) with an optional message function.
The message is kept unevaluated so the same status can be rendered against
several locale bundles without running the rule again.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from manner.combine import combine_with_priority, merge_with_priority
from manner.constants.status import (
    CONDITION_DOMAIN,
    CONDITION_PRIORITY,
    DISABLED,
    HIDDEN,
    INVALID,
    NORMAL,
    VALID,
    VALID_DOMAINS,
    VALIDITY_DOMAIN,
    VALIDITY_PRIORITY,
)
from manner.exceptions import ConfigError, RuleDefinitionError
from manner.types import Bundle, MessageFn


def _constant_message(text: str) -> MessageFn:
    def render(bundle: Bundle) -> str:
        return text

    return render


def as_message(message: str | MessageFn | None) -> MessageFn | None:
    """Normalize a plain string or message function into a message function."""
    if message is None:
        return None
    if isinstance(message, str):
        return _constant_message(message)
    if callable(message):
        return message
    raise RuleDefinitionError(f"message must be a string or a callable, got {type(message).__name__}")


@dataclass(frozen=True)
class Status:
    """Outcome assigned to one field by one rule."""

    kind: str
    message: MessageFn | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, str) or not self.kind:
            raise RuleDefinitionError(f"status kind must be a non-empty string, got {self.kind!r}")
        object.__setattr__(self, "message", as_message(self.message))

    def is_kind(self, kind: str) -> bool:
        return self.kind == kind

    def render(self, bundle: Bundle) -> str | None:
        """Render the message against a locale bundle, ``None`` when there is none."""
        if self.message is None:
            return None
        return self.message(bundle)


StatusMap: TypeAlias = dict[str, Status]


class ValidityStatus(Status):
    """Status in the validity domain."""

    @classmethod
    def valid(cls) -> ValidityStatus:
        return cls(VALID)

    @classmethod
    def invalid(cls, message: str | MessageFn | None = None) -> ValidityStatus:
        return cls(INVALID, message)

    @staticmethod
    def combine(*statuses: Status) -> Status:
        return VALIDITY.combine(*statuses)


class ConditionStatus(Status):
    """Status in the condition (enable/visibility) domain."""

    @classmethod
    def normal(cls, message: str | MessageFn | None = None) -> ConditionStatus:
        return cls(NORMAL, message)

    @classmethod
    def disabled(cls, message: str | MessageFn | None = None) -> ConditionStatus:
        return cls(DISABLED, message)

    @classmethod
    def hidden(cls, message: str | MessageFn | None = None) -> ConditionStatus:
        return cls(HIDDEN, message)

    @staticmethod
    def combine(*statuses: Status) -> Status:
        return CONDITION.combine(*statuses)


@dataclass(frozen=True)
class Domain:
    """A closed set of status kinds with a dominance order and a neutral kind."""

    name: str
    priority: tuple[str, ...]
    neutral_kind: str
    status_type: type[Status]

    def neutral(self) -> Status:
        return self.status_type(self.neutral_kind)

    def combine(self, *statuses: Status) -> Status:
        return combine_with_priority(self.priority, self.neutral(), *statuses)

    def merge(self, maps: Iterable[Mapping[str, Status]]) -> StatusMap:
        return merge_with_priority(self.priority, self.neutral(), maps)


VALIDITY: Domain = Domain(
    name=VALIDITY_DOMAIN,
    priority=VALIDITY_PRIORITY,
    neutral_kind=VALID,
    status_type=ValidityStatus,
)
CONDITION: Domain = Domain(
    name=CONDITION_DOMAIN,
    priority=CONDITION_PRIORITY,
    neutral_kind=NORMAL,
    status_type=ConditionStatus,
)

_DOMAINS: dict[str, Domain] = {VALIDITY.name: VALIDITY, CONDITION.name: CONDITION}


def get_domain(name: str) -> Domain:
    """Return the domain registered under *name*."""
    domain = _DOMAINS.get(name)
    if domain is None:
        raise ConfigError(f"domain must be one of {sorted(VALID_DOMAINS)}, got {name!r}")
    return domain
