"""Rule file exceptions."""

from __future__ import annotations

from manner.exceptions.base import MannerError


class DslError(MannerError):
    """Base error for declarative rule files."""


class DslSchemaError(DslError):
    """Raised when a rule file violates the structural schema."""


class DslCompileError(DslError):
    """Raised when a validated rule entry cannot be compiled into a rule."""
