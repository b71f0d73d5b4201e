"""Root exception type."""

from __future__ import annotations


class MannerError(Exception):
    """Base class for all errors raised by Manner itself."""
