"""Central registries for rule files.

Maps predicate and action names to their factories. Only registered names
can be used from YAML.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from manner.predicates import validity as P
from manner.rules.conditions import Action, disable, enable, hide, show

PREDICATE_REGISTRY: dict[str, Callable[..., Any]] = {
    "truthy": P.truthy,
    "falsy": P.falsy,
    "equal": P.equal,
    "not_equal": P.not_equal,
    "less_than": P.less_than,
    "at_most": P.at_most,
    "greater_than": P.greater_than,
    "at_least": P.at_least,
    "between": P.between,
    "empty": P.empty,
    "not_empty": P.not_empty,
    "not_null": P.not_null,
    "length_of": P.length_of,
    "length_at_least": P.length_at_least,
    "length_at_most": P.length_at_most,
    "element_of": P.element_of,
    "numeric": P.numeric,
    "checked": P.checked,
    "unchecked": P.unchecked,
    "all_equal": P.all_equal,
}

ACTION_REGISTRY: dict[str, Callable[..., Action]] = {
    "hide": hide,
    "show": show,
    "disable": disable,
    "enable": enable,
}
