"""Declarative YAML rule files."""

from .compiler import compile_rule, compile_rule_file
from .loader import load_rule_file
from .schema import validate_rule_file

__all__ = ["compile_rule", "compile_rule_file", "load_rule_file", "validate_rule_file"]
