"""Output formats and terminal colors."""

from __future__ import annotations

from manner.constants.status import DISABLED, HIDDEN, INVALID, NORMAL, VALID

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

ANSI_RED: str = "\033[31m"
ANSI_YELLOW: str = "\033[33m"
ANSI_GREEN: str = "\033[32m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

KIND_COLORS: dict[str, str] = {
    INVALID: ANSI_RED,
    HIDDEN: ANSI_DIM,
    DISABLED: ANSI_YELLOW,
    VALID: ANSI_GREEN,
    NORMAL: ANSI_GREEN,
}
