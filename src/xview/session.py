"""
Per-request session store with flash values.

The rendering path only reads from the session. Request handlers write
original form values and validation failures with ``flash``; flashed values
survive exactly one ``cleanup()`` cycle, i.e. they are visible for the rest of
the current request and the whole of the next one.
"""

from typing import Any

ORIGINAL_VALUES = "original_values"
VALIDATION_ERRORS = "validation_errors"


class Session:
    """In-memory session scoped to one client.

    Params:
        values: Initial persistent values
    """

    ORIGINAL_VALUES = ORIGINAL_VALUES
    VALIDATION_ERRORS = VALIDATION_ERRORS

    def __init__(self, values: dict[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})
        self._flashed: dict[str, Any] = {}
        self._expiring: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value, looking at flashed values before persistent ones."""
        if key in self._flashed:
            return self._flashed[key]
        if key in self._expiring:
            return self._expiring[key]
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def flash(self, key: str, value: Any) -> None:
        """Store a value that is dropped after the next request completes."""
        self._flashed[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
        self._flashed.pop(key, None)
        self._expiring.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self._flashed or key in self._expiring or key in self._values

    def cleanup(self) -> None:
        """End a request cycle: expire values flashed one cycle ago and age the rest."""
        self._expiring = self._flashed
        self._flashed = {}

    def original_value(self, name: str, default: Any = "") -> Any:
        """Value submitted for a form field in the request that failed validation."""
        return (self.get(ORIGINAL_VALUES) or {}).get(name, default)

    def errors_for(self, name: str) -> list[Any]:
        """Failed validation rules recorded for a form field."""
        return list((self.get(VALIDATION_ERRORS) or {}).get(name, []))
