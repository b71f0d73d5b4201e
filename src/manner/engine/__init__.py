"""Incremental evaluation engine."""

from .cache import EvaluationCache, ResultCallback
from .ruleset import RuleSet, conditions, validators

__all__ = ["EvaluationCache", "ResultCallback", "RuleSet", "conditions", "validators"]
