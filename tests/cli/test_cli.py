"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from manner.cli.main import build_parser, main
from manner.engine import validators
from manner.rules import Rule


def test_build_parser_accepts_evaluate_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "evaluate",
            "--rules",
            str(tmp_path / "rules.yaml"),
            "--model",
            str(tmp_path / "model.yaml"),
            "--format",
            "json",
            "--locale",
            "en",
            "--fill-missing",
        ]
    )

    assert args.command == "evaluate"
    assert args.rules == tmp_path / "rules.yaml"
    assert args.format == "json"
    assert args.fill_missing is True


def test_build_parser_defaults(tmp_path: Path) -> None:
    args = build_parser().parse_args(["evaluate", "-r", "rules.yaml", "-m", "model.yaml"])

    assert args.format is None
    assert args.locale is None
    assert args.fill_missing is None
    assert args.root == Path(".")


def test_build_parser_rejects_unknown_format() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["evaluate", "-r", "a", "-m", "b", "--format", "xml"])


def test_build_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_validate_rules_reports_rule_count(fixtures_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-rules", "--rules", str(fixtures_root / "rules" / "signup.yaml")])

    assert code == 0
    assert "Rule file is valid: 3 validity rules." in capsys.readouterr().out


def test_validate_rules_fails_on_bad_file(fixtures_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-rules", "--rules", str(fixtures_root / "rules" / "broken.yaml")])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_evaluate_prints_json(fixtures_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "evaluate",
            "--rules",
            str(fixtures_root / "rules" / "signup.yaml"),
            "--model",
            str(fixtures_root / "model.yaml"),
            "--root",
            str(tmp_path),
            "--format",
            "json",
        ]
    )

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["age"] == {"status": "invalid", "message": "Must be at least 18"}
    assert payload["password"]["message"] == "Values must match"
    assert payload["email"]["message"] == "Cannot be empty"
    assert payload["phone"]["status"] == "invalid"


def test_evaluate_prints_text(fixtures_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    model = tmp_path / "model.yaml"
    model.write_text("has_wheels: false\nkind: car\n", encoding="utf-8")

    code = main(
        [
            "evaluate",
            "-r",
            str(fixtures_root / "rules" / "vehicle.yaml"),
            "-m",
            str(model),
            "--root",
            str(tmp_path),
            "--no-color",
        ]
    )

    assert code == 0
    assert capsys.readouterr().out.split() == ["number_of_wheels", "hidden"]


def test_evaluate_uses_config_file(fixtures_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "manner.yaml").write_text("fill_missing: true\n", encoding="utf-8")
    model = tmp_path / "model.yaml"
    model.write_text("has_wheels: true\nkind: car\n", encoding="utf-8")

    code = main(
        [
            "evaluate",
            "-r",
            str(fixtures_root / "rules" / "vehicle.yaml"),
            "-m",
            str(model),
            "--root",
            str(tmp_path),
            "-f",
            "json",
        ]
    )

    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"number_of_wheels": {"status": "normal", "message": None}}


def test_evaluate_rejects_unknown_locale(
    fixtures_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(
        [
            "evaluate",
            "-r",
            str(fixtures_root / "rules" / "signup.yaml"),
            "-m",
            str(fixtures_root / "model.yaml"),
            "--root",
            str(tmp_path),
            "--locale",
            "xx",
        ]
    )

    assert code == 2
    assert "Unknown locale" in capsys.readouterr().err


def test_evaluate_rejects_non_mapping_model(
    fixtures_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    model = tmp_path / "model.yaml"
    model.write_text("- 1\n- 2\n", encoding="utf-8")

    rules = fixtures_root / "rules" / "signup.yaml"

    code = main(["evaluate", "-r", str(rules), "-m", str(model), "--root", str(tmp_path)])

    assert code == 2
    assert "must contain a mapping" in capsys.readouterr().err


def test_validate_rules_rejects_single_value_predicate_on_several_fields(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rules = tmp_path / "rules.yaml"
    rules.write_text(
        "version: 1\ndomain: validity\nrules:\n  - fields: [a, b]\n    predicate: not_empty\n",
        encoding="utf-8",
    )

    code = main(["validate-rules", "--rules", str(rules)])

    assert code == 2
    assert "judges a single value" in capsys.readouterr().err


def test_evaluate_returns_one_when_a_rule_fails(
    fixtures_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    def explode(values: object) -> dict:
        raise TypeError("rule exploded")

    failing = validators(Rule(("age",), explode))

    with patch("manner.cli.handlers.load_rule_file", return_value=failing):
        code = main(
            [
                "evaluate",
                "-r",
                str(fixtures_root / "rules" / "signup.yaml"),
                "-m",
                str(fixtures_root / "model.yaml"),
                "--root",
                str(tmp_path),
            ]
        )

    captured = capsys.readouterr()
    assert code == 1
    assert "Evaluation error: rule exploded" in captured.err
    assert captured.out == ""
