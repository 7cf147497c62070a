"""SQLiteStore — durable, single-file storage backend using sqlite3."""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
from collections.abc import Mapping
from typing import Any

from tinyprefs.entry import Entry
from tinyprefs.exceptions import StoreError, StoreUnavailableError
from tinyprefs.stores.base import PrimitiveStore

logger = logging.getLogger(__name__)

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS prefs (
    namespace TEXT NOT NULL,
    key       TEXT NOT NULL,
    kind      TEXT NOT NULL,
    value     TEXT NOT NULL,
    PRIMARY KEY (namespace, key)
)
"""


class SQLiteStore(PrimitiveStore):
    """Persistent store backed by a single SQLite file.

    The connection is opened eagerly so that an unreachable database fails
    at construction time rather than on first use.

    Parameters:
        db_path:   Path to the SQLite database file.  Use ``":memory:"``
                   for an in-memory database (useful for testing).
        namespace: Namespace stored in the ``namespace`` column.
    """

    def __init__(self, db_path: str = "tinyprefs.db", namespace: str = "TinyPrefs") -> None:
        super().__init__(namespace)
        self._db_path = db_path
        self._lock = threading.Lock()
        try:
            self._db: sqlite3.Connection | None = sqlite3.connect(
                db_path, check_same_thread=False
            )
            self._db.execute(_CREATE_TABLE)
            self._db.commit()
        except sqlite3.Error as exc:
            raise StoreUnavailableError(f"cannot open '{db_path}': {exc}") from exc

    def _conn(self) -> sqlite3.Connection:
        if self._db is None:
            raise StoreError("connect", f"store '{self._db_path}' is closed")
        return self._db

    def close(self) -> None:
        with self._lock:
            if self._db:
                self._db.close()
                self._db = None

    # ── PrimitiveStore protocol ──────────────────────────────

    def read(self, key: str) -> Entry | None:
        with self._lock:
            row = (
                self._conn()
                .execute(
                    "SELECT kind, value FROM prefs WHERE namespace = ? AND key = ?",
                    (self.namespace, key),
                )
                .fetchone()
            )
        if row is None:
            return None
        return _to_entry(key, row[0], row[1])

    def read_all(self) -> dict[str, Entry]:
        with self._lock:
            rows = (
                self._conn()
                .execute(
                    "SELECT key, kind, value FROM prefs WHERE namespace = ?",
                    (self.namespace,),
                )
                .fetchall()
            )
        return {key: _to_entry(key, kind, value) for key, kind, value in rows}

    def commit(self, mutations: Mapping[str, Entry | None], clear: bool = False) -> None:
        with self._lock:
            db = self._conn()
            try:
                with db:
                    if clear:
                        db.execute("DELETE FROM prefs WHERE namespace = ?", (self.namespace,))
                    for key, entry in mutations.items():
                        if entry is None:
                            db.execute(
                                "DELETE FROM prefs WHERE namespace = ? AND key = ?",
                                (self.namespace, key),
                            )
                        else:
                            db.execute(
                                "INSERT OR REPLACE INTO prefs (namespace, key, kind, value) "
                                "VALUES (?, ?, ?, ?)",
                                (self.namespace, key, entry.kind, _dump(entry)),
                            )
            except sqlite3.Error as exc:
                raise StoreError("commit", str(exc)) from exc
        logger.debug("Committed %d mutation(s) to %s", len(mutations), self._db_path)


def _dump(entry: Entry) -> str:
    if entry.kind == "string_set":
        return json.dumps(sorted(entry.value))
    return json.dumps(entry.value)


def _to_entry(key: str, kind: str, raw: str) -> Entry:
    value: Any = json.loads(raw)
    if kind == "string_set":
        value = frozenset(value)
    return Entry(key, kind, value)  # type: ignore[arg-type]
