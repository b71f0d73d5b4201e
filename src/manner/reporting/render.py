"""Render evaluated field statuses as text or JSON."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from manner.constants.reporting import ANSI_RESET, KIND_COLORS
from manner.status import Status
from manner.types import Bundle


def to_payload(result: Mapping[str, Status], bundle: Bundle) -> dict[str, dict[str, Any]]:
    """Build a JSON-serializable payload, rendering messages against *bundle*."""
    return {
        field_name: {"status": result[field_name].kind, "message": result[field_name].render(bundle)}
        for field_name in sorted(result)
    }


def render_json(result: Mapping[str, Status], bundle: Bundle) -> str:
    return json.dumps(to_payload(result, bundle), indent=2, sort_keys=True)


def _colorize(kind: str, color: bool) -> str:
    code = KIND_COLORS.get(kind, "")
    if not color or not code:
        return kind
    return f"{code}{kind}{ANSI_RESET}"


def render_text(result: Mapping[str, Status], bundle: Bundle, *, color: bool = False) -> str:
    """One aligned line per field: name, status and message when present."""
    if not result:
        return "No field statuses."
    width = max(len(field_name) for field_name in result)
    lines = []
    for field_name in sorted(result):
        status = result[field_name]
        line = f"{field_name.ljust(width)}  {_colorize(status.kind, color)}"
        text = status.render(bundle)
        if text:
            line = f"{line}  {text}"
        lines.append(line)
    return "\n".join(lines)
