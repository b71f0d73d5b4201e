"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "manner.yaml"

DEFAULT_LOCALE: str = "en"
DEFAULT_FILL_MISSING: bool = False
DEFAULT_DEBOUNCE_MS: int = 0
DEFAULT_LOG_LEVEL: str = "INFO"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"locale", "fill_missing", "debounce_ms", "log_level"})
VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
