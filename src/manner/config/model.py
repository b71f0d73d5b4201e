"""Config data model."""

from __future__ import annotations

from dataclasses import dataclass

from manner.constants.config import (
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FILL_MISSING,
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
)


@dataclass(frozen=True)
class MannerConfig:
    """Resolved evaluation settings."""

    locale: str = DEFAULT_LOCALE
    fill_missing: bool = DEFAULT_FILL_MISSING
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    log_level: str = DEFAULT_LOG_LEVEL
