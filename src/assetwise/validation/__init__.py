"""Object validation: error classification, business rules and best-practice warnings."""

from .rules import BEST_PRACTICE_RULES, BUSINESS_RULES, Rule, RuleContext, apply_rules
from .validator import ObjectValidator, classify_error, extract_field

__all__ = [
    "BEST_PRACTICE_RULES",
    "BUSINESS_RULES",
    "ObjectValidator",
    "Rule",
    "RuleContext",
    "apply_rules",
    "classify_error",
    "extract_field",
]
