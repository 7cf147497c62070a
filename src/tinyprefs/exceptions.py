"""Custom exceptions for the tinyprefs package."""

from __future__ import annotations


class TinyPrefsError(Exception):
    """Base exception for all tinyprefs errors."""


class DecodeError(TinyPrefsError):
    """Raised when stored text cannot be decoded into the requested type."""


class EncodeError(TinyPrefsError):
    """Raised when a value cannot be serialized to text."""


class CategoryMismatchError(TinyPrefsError):
    """Raised when a key is read with a getter of a different kind."""

    def __init__(self, key: str, expected: str, actual: str) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(f"Key '{key}' holds a {actual} value, not {expected}")


class StoreError(TinyPrefsError):
    """Raised when a primitive store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class StoreUnavailableError(StoreError):
    """Raised when the primitive store cannot be opened."""

    def __init__(self, detail: str = "") -> None:
        super().__init__("open", detail)
