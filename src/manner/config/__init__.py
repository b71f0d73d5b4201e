"""Configuration loading and normalization.

This package facade re-exports the public names so callers can write
``from manner.config import ...``.
"""

from __future__ import annotations

from manner.config.loader import load_config
from manner.config.model import MannerConfig

__all__ = ["MannerConfig", "load_config"]
