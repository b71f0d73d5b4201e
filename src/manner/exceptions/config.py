"""Configuration-related exceptions."""

from __future__ import annotations

from manner.exceptions.base import MannerError


class ConfigError(MannerError, ValueError):
    """Raised when ``manner.yaml`` or a CLI option is invalid."""
