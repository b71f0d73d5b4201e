"""Rule construction exceptions.

These are raised eagerly, when a rule is bound, never at evaluation time.
"""

from __future__ import annotations

from manner.exceptions.base import MannerError


class RuleDefinitionError(MannerError, ValueError):
    """Raised when a rule, predicate or action is malformed."""


class StatusKindError(RuleDefinitionError):
    """Raised when a status kind is not part of a priority order."""
