"""Rendering evaluation results."""

from .render import render_json, render_text, to_payload

__all__ = ["render_json", "render_text", "to_payload"]
