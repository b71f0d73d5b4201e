"""Shared exception hierarchy for Manner."""

from __future__ import annotations

from .base import MannerError
from .config import ConfigError
from .dsl import DslCompileError, DslError, DslSchemaError
from .messages import MessageLookupError
from .rules import RuleDefinitionError, StatusKindError

__all__ = [
    "ConfigError",
    "DslCompileError",
    "DslError",
    "DslSchemaError",
    "MannerError",
    "MessageLookupError",
    "RuleDefinitionError",
    "StatusKindError",
]
