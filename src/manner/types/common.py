"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Literal, TypeAlias

# A locale bundle is opaque to the engine; only message functions look inside.
Bundle: TypeAlias = Mapping[str, Any]
MessageFn: TypeAlias = Callable[[Bundle], str | None]
FieldValues: TypeAlias = Mapping[str, Any]

EntryState: TypeAlias = Literal["empty", "cached", "pending"]
OutputFormat: TypeAlias = Literal["text", "json"]
