"""
Form validation and flashing of failures into the session.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from xview.session import ORIGINAL_VALUES, VALIDATION_ERRORS, Session
from xview.validation.rules import Rule


class Validator:
    """Applies rule lists to submitted values."""

    def validate(
        self, values: Mapping[str, Any], rules: Mapping[str, Sequence[Rule]]
    ) -> dict[str, list[Rule]]:
        """
        Validate values field by field.

        Params:
            values: Submitted values keyed by field name
            rules: Rules to apply keyed by field name; missing values validate as None

        Returns:
            Failed rules keyed by field name, only for fields with failures
        """
        failures: dict[str, list[Rule]] = {}
        for name, field_rules in rules.items():
            value = values.get(name)
            failed = [rule for rule in field_rules if not rule.is_valid(value)]
            if failed:
                failures[name] = failed
        return failures


def flash_validation_failure(
    session: Session, values: Mapping[str, Any], failures: Mapping[str, Sequence[Rule]]
) -> None:
    """Flash submitted values and failed rules so the next render can show them."""
    session.flash(VALIDATION_ERRORS, {name: list(rules) for name, rules in failures.items()})
    session.flash(ORIGINAL_VALUES, dict(values))
