"""Utility helpers for Manner."""

from .awaitables import call, resolve
from .equality import same_values

__all__ = ["call", "resolve", "same_values"]
