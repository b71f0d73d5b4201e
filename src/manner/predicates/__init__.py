"""Predicates for use with ``bind_single`` and ``bind_many``."""

from . import boolean, validity

__all__ = ["boolean", "validity"]
