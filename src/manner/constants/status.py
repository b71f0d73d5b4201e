"""Status kinds and priority orders for both status domains."""

from __future__ import annotations

VALID: str = "valid"
INVALID: str = "invalid"

NORMAL: str = "normal"
DISABLED: str = "disabled"
HIDDEN: str = "hidden"

# Most dominant first.
VALIDITY_PRIORITY: tuple[str, ...] = (INVALID, VALID)
CONDITION_PRIORITY: tuple[str, ...] = (HIDDEN, DISABLED, NORMAL)

VALIDITY_DOMAIN: str = "validity"
CONDITION_DOMAIN: str = "condition"
VALID_DOMAINS: frozenset[str] = frozenset({VALIDITY_DOMAIN, CONDITION_DOMAIN})
