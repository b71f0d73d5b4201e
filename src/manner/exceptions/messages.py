"""Message rendering exceptions."""

from __future__ import annotations

from manner.exceptions.base import MannerError


class MessageLookupError(MannerError, LookupError):
    """Raised when a locale bundle has no usable template for a message."""
