"""Localized message lookup."""

from .bundles import available_locales, load_bundle
from .messages import i18n_message

__all__ = ["available_locales", "i18n_message", "load_bundle"]
