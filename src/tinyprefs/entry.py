"""Entry — one key's primitive value as it travels from buffer to store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Kind = Literal["string", "int", "long", "float", "boolean", "string_set"]

INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1


@dataclass(frozen=True)
class Entry:
    """Immutable ``(key, kind, value)`` record.

    Attributes:
        key:   Store key.
        kind:  Primitive kind the value was written as.
        value: The primitive value.  ``string_set`` values are frozensets.
    """

    key: str
    kind: Kind
    value: Any

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def string(key: str, value: str) -> Entry:
        if not isinstance(value, str):
            raise TypeError(f"Expected str for '{key}', got {type(value).__name__}")
        return Entry(key, "string", value)

    @staticmethod
    def int32(key: str, value: int) -> Entry:
        _check_int(key, value, INT_MIN, INT_MAX)
        return Entry(key, "int", value)

    @staticmethod
    def int64(key: str, value: int) -> Entry:
        _check_int(key, value, LONG_MIN, LONG_MAX)
        return Entry(key, "long", value)

    @staticmethod
    def float_(key: str, value: float) -> Entry:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Expected float for '{key}', got {type(value).__name__}")
        return Entry(key, "float", float(value))

    @staticmethod
    def boolean(key: str, value: bool) -> Entry:
        if not isinstance(value, bool):
            raise TypeError(f"Expected bool for '{key}', got {type(value).__name__}")
        return Entry(key, "boolean", value)

    @staticmethod
    def string_set(key: str, value: Any) -> Entry:
        if isinstance(value, str):
            raise TypeError(f"Expected an iterable of str for '{key}', got str")
        items = frozenset(value)
        if not all(isinstance(item, str) for item in items):
            raise TypeError(f"String set '{key}' contains non-str members")
        return Entry(key, "string_set", items)


def _check_int(key: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int for '{key}', got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"Value {value} for '{key}' is outside [{low}, {high}]")
