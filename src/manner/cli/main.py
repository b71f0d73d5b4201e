"""CLI entrypoint for Manner."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from manner import __version__
from manner.cli.handlers import handle_evaluate, handle_validate_rules
from manner.constants.branding import CLI_DESCRIPTION
from manner.constants.reporting import VALID_OUTPUT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="manner",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("evaluate", help="Evaluate a rule file against a model")
    evaluate.add_argument("-r", "--rules", type=Path, required=True, help="Rule file (YAML)")
    evaluate.add_argument("-m", "--model", type=Path, required=True, help="Model file (YAML or JSON mapping)")
    evaluate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    evaluate.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Directory searched for manner.yaml when --config is not given (default: current directory)",
    )
    evaluate.add_argument(
        "-f",
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=None,
        help="Output format (default: text)",
    )
    evaluate.add_argument("-l", "--locale", default=None, help="Locale used to render messages")
    evaluate.add_argument(
        "--fill-missing",
        action="store_true",
        default=None,
        help="Report every output field, defaulting to the neutral status",
    )
    evaluate.add_argument("--no-color", action="store_true", help="Disable colored output")
    evaluate.add_argument("-v", "--verbose", action="store_true", help="Log engine diagnostics")

    validate = subparsers.add_parser("validate-rules", help="Validate a rule file without evaluating it")
    validate.add_argument("-r", "--rules", type=Path, required=True, help="Rule file (YAML)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-rules":
        return handle_validate_rules(args)
    if args.command == "evaluate":
        return handle_evaluate(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
