"""Rules and the helpers that build them."""

from .base import Rule, normalize_field_names, slice_values
from .bind import any_of, bind_many, bind_single
from .conditions import Action, disable, enable, hide, show, when

__all__ = [
    "Action",
    "Rule",
    "any_of",
    "bind_many",
    "bind_single",
    "disable",
    "enable",
    "hide",
    "normalize_field_names",
    "show",
    "slice_values",
    "when",
]
