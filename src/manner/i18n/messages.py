"""Message functions that look up templates in a locale bundle.

A bundle is a nested mapping ``{category: {name: template}}``. Templates are
``str.format`` strings; a template may instead be a mapping of plural forms
(``one``/``other``) selected by the ``value`` placeholder.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias

from manner.exceptions import MessageLookupError
from manner.types import Bundle

MessageValues: TypeAlias = Callable[[Sequence[Any], Sequence[Any]], Mapping[str, Any]]
PredicateMessage: TypeAlias = Callable[[Bundle, Sequence[Any], Sequence[Any]], str]


def first_argument(args: Sequence[Any], rest: Sequence[Any]) -> Mapping[str, Any]:
    """Default placeholders: ``value`` is the first predicate argument."""
    return {"value": args[0] if args else None}


def _select_plural(forms: Mapping[str, Any], values: Mapping[str, Any]) -> Any:
    form = "one" if values.get("value") == 1 else "other"
    return forms.get(form, forms.get("other"))


def i18n_message(category: str, name: str, values: MessageValues | None = None) -> PredicateMessage:
    """Build a message function for ``bundle[category][name]``.

    The returned function receives the bundle, the arguments the predicate
    was built with and the values it was called with.
    """
    to_values = values or first_argument

    def render(bundle: Bundle, args: Sequence[Any], rest: Sequence[Any]) -> str:
        try:
            template = bundle[category][name]
        except (KeyError, TypeError) as exc:
            raise MessageLookupError(f"No message template for {category}.{name}") from exc

        placeholders = to_values(args, rest)
        if isinstance(template, Mapping):
            template = _select_plural(template, placeholders)
        if not isinstance(template, str):
            raise MessageLookupError(f"Expected a string template for {category}.{name}, got {template!r}")
        try:
            return template.format(**placeholders)
        except (KeyError, IndexError) as exc:
            raise MessageLookupError(f"Template for {category}.{name} uses unknown placeholder {exc}") from exc

    return render
