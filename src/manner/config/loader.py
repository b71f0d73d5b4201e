"""Config loading and normalization."""

from __future__ import annotations

from pathlib import Path

from manner.config.model import MannerConfig
from manner.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FILL_MISSING,
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
    VALID_LOG_LEVELS,
)
from manner.exceptions import ConfigError
from manner.io import load_yaml_mapping


def load_config(root: Path, config_path: Path | None = None) -> MannerConfig:
    """Load and validate settings from ``manner.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return MannerConfig()

    raw = load_yaml_mapping(path, label="config file", allow_empty=True)

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

    locale = raw.get("locale", DEFAULT_LOCALE)
    if not isinstance(locale, str) or not locale.strip():
        raise ConfigError("locale must be a non-empty string")

    fill_missing = raw.get("fill_missing", DEFAULT_FILL_MISSING)
    if not isinstance(fill_missing, bool):
        raise ConfigError("fill_missing must be a boolean")

    debounce_ms = raw.get("debounce_ms", DEFAULT_DEBOUNCE_MS)
    if isinstance(debounce_ms, bool) or not isinstance(debounce_ms, int) or debounce_ms < 0:
        raise ConfigError("debounce_ms must be a non-negative integer")

    log_level = raw.get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {log_level!r}")

    return MannerConfig(
        locale=locale.strip(),
        fill_missing=fill_missing,
        debounce_ms=debounce_ms,
        log_level=log_level.upper(),
    )
