"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "manner"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: evaluate field validity and visibility rules against a model"
