"""Strict schema validation for version 1 rule files.

Validates parsed YAML dicts at load time. Raises DslSchemaError on the first
violation; nothing is skipped.
"""

from __future__ import annotations

from typing import Any

from manner.constants.dsl_schema import (
    ALLOWED_ACTION_KEYS,
    ALLOWED_RULE_KEYS,
    ALLOWED_TOP_KEYS,
    MULTI_VALUE_PREDICATES,
    REQUIRED_ACTION_KEYS,
    REQUIRED_TOP_KEYS,
    RULE_FILE_VERSION,
    RULE_SHAPE_KEYS,
    VALID_ACTIONS,
    VALID_PREDICATES,
)
from manner.constants.status import CONDITION_DOMAIN, VALID_DOMAINS
from manner.exceptions import DslSchemaError


def validate_rule_file(data: Any, source_path: str) -> None:
    """Validate a parsed rule file. Raises DslSchemaError on any violation."""
    if not isinstance(data, dict):
        raise DslSchemaError(f"{source_path}: rule file must be a mapping, got {type(data).__name__}")

    unknown_top = set(data.keys()) - ALLOWED_TOP_KEYS
    if unknown_top:
        raise DslSchemaError(f"{source_path}: unknown top-level keys: {sorted(unknown_top)}")

    for key in sorted(REQUIRED_TOP_KEYS):
        if key not in data:
            raise DslSchemaError(f"{source_path}: missing required key '{key}'")

    version = data["version"]
    if isinstance(version, bool) or not isinstance(version, int) or version != RULE_FILE_VERSION:
        raise DslSchemaError(f"{source_path}: 'version' must be {RULE_FILE_VERSION}, got {version!r}")

    domain = data["domain"]
    if domain not in VALID_DOMAINS:
        raise DslSchemaError(f"{source_path}: 'domain' must be one of {sorted(VALID_DOMAINS)}, got {domain!r}")

    if "description" in data and not isinstance(data["description"], str):
        raise DslSchemaError(f"{source_path}: 'description' must be a string")

    rules = data["rules"]
    if not isinstance(rules, list) or not rules:
        raise DslSchemaError(f"{source_path}: 'rules' must be a non-empty list")

    for index, entry in enumerate(rules):
        where = f"{source_path}: rules[{index}]"
        _validate_entry(entry, where)
        is_condition = isinstance(entry, dict) and "when" in entry
        if domain == CONDITION_DOMAIN and not is_condition:
            raise DslSchemaError(f"{where}: condition rule files only accept 'when' rules")
        if domain != CONDITION_DOMAIN and is_condition:
            raise DslSchemaError(f"{where}: 'when' rules require domain '{CONDITION_DOMAIN}'")


def _validate_entry(entry: Any, where: str, *, nested: bool = False) -> None:
    if not isinstance(entry, dict):
        raise DslSchemaError(f"{where}: rule must be a mapping")

    unknown = set(entry.keys()) - ALLOWED_RULE_KEYS
    if unknown:
        raise DslSchemaError(f"{where}: unknown rule keys: {sorted(unknown)}")

    shapes = sorted(set(entry.keys()) & RULE_SHAPE_KEYS)
    if len(shapes) != 1:
        raise DslSchemaError(f"{where}: rule must have exactly one of {sorted(RULE_SHAPE_KEYS)}, got {shapes}")
    shape = shapes[0]

    if "debounce_ms" in entry:
        _validate_debounce(entry["debounce_ms"], where)

    if shape in ("field", "fields"):
        _validate_bound_predicate(entry, shape, where)
    elif shape == "any":
        _validate_any(entry, where)
    else:
        if nested:
            raise DslSchemaError(f"{where}: 'when' rules cannot be nested")
        _validate_when(entry, where)


def _validate_bound_predicate(entry: dict[str, Any], shape: str, where: str) -> None:
    if "actions" in entry:
        raise DslSchemaError(f"{where}: 'actions' is only valid on 'when' rules")

    if shape == "field":
        _validate_field_name(entry["field"], f"{where}.field")
    else:
        names = entry["fields"]
        if not isinstance(names, list) or not names:
            raise DslSchemaError(f"{where}: 'fields' must be a non-empty list of field names")
        for name in names:
            _validate_field_name(name, f"{where}.fields")

    if "predicate" not in entry:
        raise DslSchemaError(f"{where}: missing 'predicate'")
    if entry["predicate"] not in VALID_PREDICATES:
        raise DslSchemaError(
            f"{where}: predicate must be one of {sorted(VALID_PREDICATES)}, got {entry['predicate']!r}"
        )
    if shape == "fields" and len(entry["fields"]) > 1 and entry["predicate"] not in MULTI_VALUE_PREDICATES:
        raise DslSchemaError(
            f"{where}: predicate {entry['predicate']!r} judges a single value; "
            f"use one of {sorted(MULTI_VALUE_PREDICATES)} with several 'fields'"
        )
    if "args" in entry and not isinstance(entry["args"], list):
        raise DslSchemaError(f"{where}: 'args' must be a list")
    if "message" in entry and not isinstance(entry["message"], str):
        raise DslSchemaError(f"{where}: 'message' must be a string")


def _validate_any(entry: dict[str, Any], where: str) -> None:
    for key in ("predicate", "args", "message", "actions"):
        if key in entry:
            raise DslSchemaError(f"{where}: '{key}' is not valid on 'any' rules")
    children = entry["any"]
    if not isinstance(children, list) or not children:
        raise DslSchemaError(f"{where}: 'any' must be a non-empty list of rules")
    for index, child in enumerate(children):
        _validate_entry(child, f"{where}.any[{index}]", nested=True)


def _validate_when(entry: dict[str, Any], where: str) -> None:
    for key in ("predicate", "args", "message"):
        if key in entry:
            raise DslSchemaError(f"{where}: '{key}' belongs inside 'when', not beside it")
    _validate_entry(entry["when"], f"{where}.when", nested=True)

    actions = entry.get("actions")
    if not isinstance(actions, list) or not actions:
        raise DslSchemaError(f"{where}: 'when' rules need a non-empty 'actions' list")
    for index, action in enumerate(actions):
        _validate_action(action, f"{where}.actions[{index}]")


def _validate_action(action: Any, where: str) -> None:
    if not isinstance(action, dict):
        raise DslSchemaError(f"{where}: action must be a mapping")

    unknown = set(action.keys()) - ALLOWED_ACTION_KEYS
    if unknown:
        raise DslSchemaError(f"{where}: unknown action keys: {sorted(unknown)}")
    for key in sorted(REQUIRED_ACTION_KEYS):
        if key not in action:
            raise DslSchemaError(f"{where}: action missing required key '{key}'")

    if action["action"] not in VALID_ACTIONS:
        raise DslSchemaError(f"{where}: action must be one of {sorted(VALID_ACTIONS)}, got {action['action']!r}")
    names = action["fields"]
    if not isinstance(names, list) or not names:
        raise DslSchemaError(f"{where}: 'fields' must be a non-empty list of field names")
    for name in names:
        _validate_field_name(name, f"{where}.fields")
    if "message" in action and not isinstance(action["message"], str):
        raise DslSchemaError(f"{where}: 'message' must be a string")


def _validate_field_name(value: Any, where: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise DslSchemaError(f"{where}: field names must be non-empty strings, got {value!r}")


def _validate_debounce(value: Any, where: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DslSchemaError(f"{where}: 'debounce_ms' must be a non-negative integer, got {value!r}")
