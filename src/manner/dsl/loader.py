"""Load rule files from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from manner.config import MannerConfig
from manner.dsl.compiler import compile_rule_file
from manner.engine import EvaluationCache, RuleSet
from manner.exceptions import ConfigError, DslCompileError, DslSchemaError
from manner.io import load_yaml_mapping

logger = logging.getLogger(__name__)


def load_rule_file(
    path: Path,
    *,
    config: MannerConfig | None = None,
    cache: EvaluationCache | None = None,
) -> RuleSet:
    """Read, validate and compile the rule file at *path*.

    Schema and compile failures are reported as ConfigError so callers deal
    with a single error type for bad input files.
    """
    config = config or MannerConfig()
    resolved = path.resolve()
    if not resolved.is_file():
        raise ConfigError(f"Rule file does not exist: {resolved}")

    raw = load_yaml_mapping(resolved, label="rule file")
    try:
        rule_set = compile_rule_file(
            raw,
            str(resolved),
            cache=cache,
            fill_missing=config.fill_missing,
            default_debounce_ms=config.debounce_ms,
        )
    except (DslCompileError, DslSchemaError) as exc:
        raise ConfigError(str(exc)) from exc

    logger.debug("Loaded %d %s rules from %s", len(rule_set.rules), rule_set.domain.name, resolved)
    return rule_set
