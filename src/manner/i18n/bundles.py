"""Bundled locale data."""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from manner.exceptions import ConfigError

logger = logging.getLogger(__name__)

LOCALES_DIR: Path = Path(__file__).parent / "locales"


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def available_locales() -> tuple[str, ...]:
    """Return the sorted names of the bundled locales."""
    return tuple(sorted(path.stem for path in LOCALES_DIR.glob("*.yaml")))


@functools.cache
def load_bundle(locale: str) -> Mapping[str, Any]:
    """Load the message bundle for *locale* as a read-only mapping shared by all callers."""
    path = LOCALES_DIR / f"{locale}.yaml"
    if not path.is_file():
        raise ConfigError(f"Unknown locale {locale!r}; available: {', '.join(available_locales())}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in locale bundle {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Locale bundle {path} must contain a mapping")
    logger.debug("Loaded locale bundle: %s", locale)
    return _freeze(raw)
