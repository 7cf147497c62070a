"""InMemoryStore — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

import threading
from collections.abc import Mapping

from tinyprefs.entry import Entry
from tinyprefs.stores.base import PrimitiveStore


class InMemoryStore(PrimitiveStore):
    """In-memory store using a plain dict.  Data is lost on process exit."""

    def __init__(self, namespace: str = "TinyPrefs") -> None:
        super().__init__(namespace)
        self._data: dict[str, Entry] = {}
        self._lock = threading.Lock()

    def read(self, key: str) -> Entry | None:
        return self._data.get(key)

    def read_all(self) -> dict[str, Entry]:
        with self._lock:
            return dict(self._data)

    def commit(self, mutations: Mapping[str, Entry | None], clear: bool = False) -> None:
        with self._lock:
            data = {} if clear else dict(self._data)
            for key, entry in mutations.items():
                if entry is None:
                    data.pop(key, None)
                else:
                    data[key] = entry
            self._data = data
