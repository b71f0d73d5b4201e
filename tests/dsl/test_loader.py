"""Tests for loading rule files from disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from manner.config import MannerConfig
from manner.dsl import load_rule_file
from manner.engine import EvaluationCache
from manner.exceptions import ConfigError


@pytest.mark.asyncio
async def test_load_validity_fixture(fixtures_root: Path, kinds) -> None:
    rule_set = load_rule_file(fixtures_root / "rules" / "signup.yaml")

    result = await rule_set.evaluate(
        {"age": 16, "password": "a", "password_confirmation": "a", "email": "x@y.z", "phone": ""}
    )

    assert kinds(result) == {"age": "invalid"}


@pytest.mark.asyncio
async def test_load_condition_fixture(fixtures_root: Path, kinds) -> None:
    rule_set = load_rule_file(fixtures_root / "rules" / "vehicle.yaml")

    result = await rule_set.evaluate({"has_wheels": True, "kind": "boat"})

    assert kinds(result) == {"number_of_wheels": "disabled"}


def test_load_uses_config_and_cache(fixtures_root: Path) -> None:
    cache = EvaluationCache()

    rule_set = load_rule_file(
        fixtures_root / "rules" / "signup.yaml",
        config=MannerConfig(fill_missing=True),
        cache=cache,
    )

    assert rule_set.cache is cache
    assert rule_set.output_names == ("age", "password", "password_confirmation", "email", "phone")


def test_load_wraps_schema_errors(fixtures_root: Path) -> None:
    with pytest.raises(ConfigError, match="older_than"):
        load_rule_file(fixtures_root / "rules" / "broken.yaml")


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_rule_file(tmp_path / "missing.yaml")


def test_load_wraps_compile_errors(tmp_path: Path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text(
        "version: 1\ndomain: validity\nrules:\n  - field: a\n    predicate: between\n    args: [1]\n",
        encoding="utf-8",
    )

    with pytest.raises(ConfigError, match="cannot build predicate"):
        load_rule_file(path)
