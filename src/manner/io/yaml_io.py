"""YAML read helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from manner.exceptions import ConfigError


def load_yaml_mapping(path: Path, *, label: str, allow_empty: bool = False) -> dict[str, Any]:
    """Read *path* as YAML and require a mapping at the top level.

    JSON documents are accepted too, YAML being a superset.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {label} {path}: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {label} {path}: {exc}") from exc

    if raw is None and allow_empty:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{label.capitalize()} {path} must contain a mapping")
    return raw
