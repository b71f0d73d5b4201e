"""Compiler: turn a validated rule file into rules and a rule set."""

from __future__ import annotations

import logging
from typing import Any

from manner.constants.dsl_schema import MULTI_VALUE_PREDICATES
from manner.dsl.registry import ACTION_REGISTRY, PREDICATE_REGISTRY
from manner.dsl.schema import validate_rule_file
from manner.engine import EvaluationCache, RuleSet
from manner.exceptions import DslCompileError, RuleDefinitionError
from manner.predicates.validity import message
from manner.rules import Action, Rule, any_of, bind_many, bind_single, when
from manner.status import get_domain

logger = logging.getLogger(__name__)


def _build_predicate(entry: dict[str, Any], where: str) -> Any:
    name = entry["predicate"]
    factory = PREDICATE_REGISTRY.get(name)
    if factory is None:
        raise DslCompileError(f"{where}: predicate '{name}' not found in predicate registry")
    if "message" in entry:
        factory = message(entry["message"], factory)

    args = entry.get("args", [])
    try:
        return factory(*args)
    except (TypeError, RuleDefinitionError) as exc:
        raise DslCompileError(f"{where}: cannot build predicate '{name}' with args {args!r}: {exc}") from exc


def _build_action(action: dict[str, Any], where: str) -> Action:
    factory = ACTION_REGISTRY.get(action["action"])
    if factory is None:
        raise DslCompileError(f"{where}: action '{action['action']}' not found in action registry")
    return factory(*action["fields"], message=action.get("message"))


def compile_rule(entry: dict[str, Any], where: str, *, default_debounce_ms: int = 0) -> Rule:
    """Compile one validated rule entry.

    Raises DslCompileError when the entry is well-formed but cannot be built.
    """
    try:
        if "field" in entry:
            rule = bind_single(entry["field"], _build_predicate(entry, where), name=where)
        elif "fields" in entry:
            if len(entry["fields"]) > 1 and entry["predicate"] not in MULTI_VALUE_PREDICATES:
                raise DslCompileError(f"{where}: predicate '{entry['predicate']}' judges a single value")
            rule = bind_many(entry["fields"], _build_predicate(entry, where), name=where)
        elif "any" in entry:
            children = [
                compile_rule(child, f"{where}.any[{index}]") for index, child in enumerate(entry["any"])
            ]
            rule = any_of(*children, name=where)
        else:
            actions = [
                _build_action(action, f"{where}.actions[{index}]")
                for index, action in enumerate(entry["actions"])
            ]
            rule = when(compile_rule(entry["when"], f"{where}.when"), *actions, name=where)
        return rule.debounced(entry.get("debounce_ms", default_debounce_ms))
    except RuleDefinitionError as exc:
        raise DslCompileError(f"{where}: {exc}") from exc


def compile_rule_file(
    data: dict[str, Any],
    source_path: str,
    *,
    cache: EvaluationCache | None = None,
    fill_missing: bool = False,
    default_debounce_ms: int = 0,
) -> RuleSet:
    """Validate and compile a parsed rule file into a rule set. Fail-fast on any error."""
    validate_rule_file(data, source_path)
    domain = get_domain(data["domain"])

    rules: list[Rule] = []
    for index, entry in enumerate(data["rules"]):
        rule = compile_rule(entry, f"{source_path}#rules[{index}]", default_debounce_ms=default_debounce_ms)
        rules.append(rule)
        logger.debug("Compiled %s rule: %s", domain.name, rule.label)

    return RuleSet(rules, domain, cache=cache, fill_missing=fill_missing)
