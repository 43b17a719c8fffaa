"""Fraud detection rules package.

Exports ALL_RULES (list of all rule instances in evaluation order) and the
individual rule classes for direct use.
"""

from .amount import HighAmountRule
from .base import FraudRule, RuleContext
from .geo import UnusualLocationRule, normalize_location
from .patterns import FACTOR_NAMES, SuspiciousPatternRule
from .velocity import RapidTransactionsRule, count_prior_in_window

# All rule instances in evaluation order; composite rules come last
ALL_RULES: list[FraudRule] = [
    HighAmountRule(),
    UnusualLocationRule(),
    RapidTransactionsRule(),
    SuspiciousPatternRule(),
]

__all__ = [
    "ALL_RULES",
    "FACTOR_NAMES",
    "FraudRule",
    "RuleContext",
    "count_prior_in_window",
    "normalize_location",
    # Amount
    "HighAmountRule",
    # Geo
    "UnusualLocationRule",
    # Velocity
    "RapidTransactionsRule",
    # Patterns
    "SuspiciousPatternRule",
]
