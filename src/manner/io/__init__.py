"""Shared file I/O helpers."""

from .yaml_io import load_yaml_mapping

__all__ = ["load_yaml_mapping"]
