"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys

from manner.config import MannerConfig, load_config
from manner.constants.reporting import DEFAULT_OUTPUT_FORMAT
from manner.dsl import load_rule_file
from manner.exceptions import ConfigError
from manner.i18n import load_bundle
from manner.io import load_yaml_mapping
from manner.reporting import render_json, render_text
from manner.types import OutputFormat

logger = logging.getLogger(__name__)


def _apply_overrides(config: MannerConfig, args: argparse.Namespace) -> MannerConfig:
    """Let explicit CLI flags win over ``manner.yaml``."""
    overrides: dict[str, object] = {}
    if args.locale is not None:
        overrides["locale"] = args.locale
    if args.fill_missing:
        overrides["fill_missing"] = True
    return dataclasses.replace(config, **overrides) if overrides else config


def handle_validate_rules(args: argparse.Namespace) -> int:
    """Compile a rule file and report whether it is valid."""
    try:
        rule_set = load_rule_file(args.rules)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print(f"Rule file is valid: {len(rule_set.rules)} {rule_set.domain.name} rules.")
    return 0


def handle_evaluate(args: argparse.Namespace) -> int:
    """Evaluate a rule file against a model file and print field statuses."""
    try:
        config = _apply_overrides(load_config(args.root, args.config), args)
        if not args.verbose:
            logging.getLogger().setLevel(config.log_level)
        bundle = load_bundle(config.locale)
        rule_set = load_rule_file(args.rules, config=config)
        model = load_yaml_mapping(args.model, label="model file", allow_empty=True)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        result = asyncio.run(rule_set.evaluate(model))
        output_format: OutputFormat = args.format or DEFAULT_OUTPUT_FORMAT
        if output_format == "json":
            output = render_json(result, bundle)
        else:
            use_color = not args.no_color and sys.stdout.isatty()
            output = render_text(result, bundle, color=use_color)
    except Exception as exc:
        # Rule failures are not wrapped; any of them fails the run.
        logger.debug("Evaluation failed", exc_info=True)
        print(f"Evaluation error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0
