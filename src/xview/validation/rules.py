"""
Validation rules for form values.

Each rule checks a single value and describes the failure with a
human-readable ``message()``, which input components render next to the
field.
"""

from typing import Any, Protocol, runtime_checkable

from attrs import frozen


@runtime_checkable
class Rule(Protocol):
    """Interface every validation rule implements."""

    def is_valid(self, value: Any) -> bool: ...

    def message(self) -> str: ...


@frozen
class Required:
    """Value must be present and not blank."""

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True

    def message(self) -> str:
        return "Value is required"


@frozen
class Between:
    """Numeric value must lie within ``min`` and ``max`` inclusive."""

    min: float
    max: float

    def is_valid(self, value: Any) -> bool:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return False
        return self.min <= number <= self.max

    def message(self) -> str:
        return f"Value should be between {self.min} and {self.max}"


@frozen
class AlphaNumeric:
    """Value may only contain letters and digits."""

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and value.isalnum()

    def message(self) -> str:
        return "Value should only contain alphanumeric characters"


@frozen
class Length:
    """String length must lie within ``min`` and ``max``; either bound may be omitted."""

    min: int | None = None
    max: int | None = None

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        if self.min is not None and len(value) < self.min:
            return False
        if self.max is not None and len(value) > self.max:
            return False
        return True

    def message(self) -> str:
        if self.min is not None and self.max is not None:
            return f"Value should be between {self.min} and {self.max} characters"
        if self.min is not None:
            return f"Value should be at least {self.min} characters"
        if self.max is not None:
            return f"Value should be at most {self.max} characters"
        return "Value should be a string"
