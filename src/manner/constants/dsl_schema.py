"""Schema constants for version 1 rule files."""

from __future__ import annotations

RULE_FILE_VERSION: int = 1

REQUIRED_TOP_KEYS: frozenset[str] = frozenset({"version", "domain", "rules"})
ALLOWED_TOP_KEYS: frozenset[str] = REQUIRED_TOP_KEYS | {"description"}

# Exactly one of these selects the kind of a rule entry.
RULE_SHAPE_KEYS: frozenset[str] = frozenset({"field", "fields", "any", "when"})

ALLOWED_RULE_KEYS: frozenset[str] = RULE_SHAPE_KEYS | {
    "predicate",
    "args",
    "message",
    "actions",
    "debounce_ms",
}

ALLOWED_ACTION_KEYS: frozenset[str] = frozenset({"action", "fields", "message"})
REQUIRED_ACTION_KEYS: frozenset[str] = frozenset({"action", "fields"})

VALID_PREDICATES: frozenset[str] = frozenset(
    {
        "truthy",
        "falsy",
        "equal",
        "not_equal",
        "less_than",
        "at_most",
        "greater_than",
        "at_least",
        "between",
        "empty",
        "not_empty",
        "not_null",
        "length_of",
        "length_at_least",
        "length_at_most",
        "element_of",
        "numeric",
        "checked",
        "unchecked",
        "all_equal",
    }
)

VALID_ACTIONS: frozenset[str] = frozenset({"hide", "show", "disable", "enable"})

# Predicates that take every bound field's value at once; the rest judge one value.
MULTI_VALUE_PREDICATES: frozenset[str] = frozenset({"all_equal"})
