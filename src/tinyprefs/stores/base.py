"""PrimitiveStore — durable key-value substrate limited to primitive kinds."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from tinyprefs.entry import Entry, Kind
from tinyprefs.exceptions import CategoryMismatchError


class PrimitiveStore(ABC):
    """Abstract base for all primitive storage backends.

    A store holds one flat *namespace* (e.g. ``"TinyPrefs"``) mapping string
    keys to :class:`~tinyprefs.entry.Entry` records.  Writes only happen
    through :meth:`commit`, which applies a whole batch atomically.

    Parameters:
        namespace: Identifier of the namespace this store reads and writes.
    """

    def __init__(self, namespace: str) -> None:
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    @abstractmethod
    def read(self, key: str) -> Entry | None:
        """Return the committed entry for *key*, or ``None`` if not found."""
        ...

    @abstractmethod
    def read_all(self) -> dict[str, Entry]:
        """Return every committed entry in the namespace."""
        ...

    @abstractmethod
    def commit(self, mutations: Mapping[str, Entry | None], clear: bool = False) -> None:
        """Apply *mutations* as one batch.

        A ``None`` value deletes the key.  With ``clear=True`` every existing
        key is removed before the mutations are applied.
        """
        ...

    # ── Typed getters ────────────────────────────────────────

    def contains(self, key: str) -> bool:
        return self.read(key) is not None

    def get_string(self, key: str, default: Any = None) -> Any:
        return self._get(key, "string", default)

    def get_int(self, key: str, default: Any = 0) -> Any:
        return self._get(key, "int", default)

    def get_long(self, key: str, default: Any = 0) -> Any:
        return self._get(key, "long", default)

    def get_float(self, key: str, default: Any = 0.0) -> Any:
        return self._get(key, "float", default)

    def get_boolean(self, key: str, default: Any = False) -> Any:
        return self._get(key, "boolean", default)

    def get_string_set(self, key: str, default: Any = None) -> Any:
        value = self._get(key, "string_set", None)
        return default if value is None else set(value)

    def _get(self, key: str, kind: Kind, default: Any) -> Any:
        entry = self.read(key)
        if entry is None:
            return default
        if entry.kind != kind:
            raise CategoryMismatchError(key, kind, entry.kind)
        return entry.value
