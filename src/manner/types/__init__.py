"""Shared type aliases for Manner."""

from .common import Bundle, EntryState, FieldValues, MessageFn, OutputFormat

__all__ = ["Bundle", "EntryState", "FieldValues", "MessageFn", "OutputFormat"]
