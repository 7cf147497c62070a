"""Primitive storage backends for preference persistence."""

from __future__ import annotations

from tinyprefs.config import StoreConfig
from tinyprefs.exceptions import StoreUnavailableError
from tinyprefs.stores.base import PrimitiveStore
from tinyprefs.stores.memory import InMemoryStore
from tinyprefs.stores.sqlite import SQLiteStore


def create_store(config: StoreConfig, namespace: str) -> PrimitiveStore:
    """Create the primitive store described by *config*.

    Raises:
        StoreUnavailableError: If the backend cannot be opened.
    """
    if config.type == "sqlite":
        if not config.path:
            raise StoreUnavailableError("SQLite store requires 'path' configuration")
        return SQLiteStore(config.path, namespace=namespace)
    return InMemoryStore(namespace)


__all__ = ["InMemoryStore", "PrimitiveStore", "SQLiteStore", "create_store"]
