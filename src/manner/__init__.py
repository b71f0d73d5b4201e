"""Manner: incremental field validity and visibility rules."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from manner.combine import combine_with_priority
from manner.debounce import debounce
from manner.engine import EvaluationCache, RuleSet, conditions, validators
from manner.rules import Rule, any_of, bind_many, bind_single, disable, enable, hide, show, when
from manner.status import CONDITION, VALIDITY, ConditionStatus, Domain, Status, ValidityStatus

__all__ = [
    "CONDITION",
    "VALIDITY",
    "ConditionStatus",
    "Domain",
    "EvaluationCache",
    "Rule",
    "RuleSet",
    "Status",
    "ValidityStatus",
    "__version__",
    "any_of",
    "bind_many",
    "bind_single",
    "combine_with_priority",
    "conditions",
    "debounce",
    "disable",
    "enable",
    "hide",
    "show",
    "validators",
    "when",
]

try:
    __version__ = version("manner")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
