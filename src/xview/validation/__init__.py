"""
Validation rules and helpers for form input components.
"""

from xview.validation.rules import AlphaNumeric, Between, Length, Required, Rule
from xview.validation.validator import Validator, flash_validation_failure

__all__ = [
    "Rule",
    "Required",
    "Between",
    "AlphaNumeric",
    "Length",
    "Validator",
    "flash_validation_failure",
]
