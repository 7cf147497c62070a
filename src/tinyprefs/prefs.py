"""TinyPrefs — typed key-value facade over a primitive store."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from tinyprefs import codec
from tinyprefs.entry import Entry, Kind
from tinyprefs.exceptions import CategoryMismatchError

if TYPE_CHECKING:
    import httpx
    from PIL import Image

    from tinyprefs.stores.base import PrimitiveStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TinyPrefs:
    """Typed accessors for primitives, objects, lists, images and locators.

    Every ``put_*`` call is staged in a mutation buffer and returns ``self``
    so calls can be chained.  Staged values are visible to ``get_*`` on this
    instance straight away but only reach the store on :meth:`commit`::

        prefs.put_int("age", 30).put_string("name", "Ada").commit()

    ``get_*`` calls return *default* untouched when the key is absent.

    Parameters:
        store: The primitive store this facade reads from and commits to.
    """

    def __init__(self, store: PrimitiveStore) -> None:
        self._store = store
        self._pending: dict[str, Entry | None] = {}
        self._cleared = False
        self._lock = threading.RLock()

    @property
    def store(self) -> PrimitiveStore:
        return self._store

    @property
    def has_pending(self) -> bool:
        with self._lock:
            return bool(self._pending) or self._cleared

    # ── primitives ───────────────────────────────────────────

    def put_string(self, key: str, value: str) -> TinyPrefs:
        return self._stage(Entry.string(key, value))

    def get_string(self, key: str, default: Any = "") -> Any:
        return self._get(key, "string", default)

    def put_int(self, key: str, value: int) -> TinyPrefs:
        """Stage a 32-bit integer.  Raises ``ValueError`` when out of range."""
        return self._stage(Entry.int32(key, value))

    def get_int(self, key: str, default: Any = 0) -> Any:
        return self._get(key, "int", default)

    def put_long(self, key: str, value: int) -> TinyPrefs:
        """Stage a 64-bit integer.  Raises ``ValueError`` when out of range."""
        return self._stage(Entry.int64(key, value))

    def get_long(self, key: str, default: Any = 0) -> Any:
        return self._get(key, "long", default)

    def put_float(self, key: str, value: float) -> TinyPrefs:
        return self._stage(Entry.float_(key, value))

    def get_float(self, key: str, default: Any = 0.0) -> Any:
        return self._get(key, "float", default)

    def put_boolean(self, key: str, value: bool) -> TinyPrefs:
        return self._stage(Entry.boolean(key, value))

    def get_boolean(self, key: str, default: Any = False) -> Any:
        return self._get(key, "boolean", default)

    def put_string_set(self, key: str, value: Iterable[str]) -> TinyPrefs:
        return self._stage(Entry.string_set(key, value))

    def get_string_set(self, key: str, default: Any = None) -> Any:
        """Return a fresh ``set`` copy of the stored strings, or *default*."""
        value = self._get(key, "string_set", None)
        return default if value is None else set(value)

    # ── structured values ────────────────────────────────────

    def put_object(self, key: str, value: Any) -> TinyPrefs:
        """Stage *value* as JSON.  See :func:`tinyprefs.codec.encode_object`."""
        if value is None:
            raise TypeError(f"Cannot store None for '{key}'; use remove() instead")
        return self._stage(Entry.string(key, codec.encode_object(value)))

    def get_object(self, key: str, object_type: type[T] | Any, default: Any = None) -> Any:
        """Decode the JSON at *key* into *object_type*.

        No type tag is stored, so *object_type* must be the type that was
        written.  A mismatched type is undefined: it may decode into
        something unexpected or raise :class:`~tinyprefs.exceptions.DecodeError`.

        Raises:
            DecodeError: If the stored text does not decode into *object_type*.
        """
        text = self._get(key, "string", None)
        if text is None:
            return default
        return codec.decode_object(text, object_type)

    def put_list(self, key: str, values: Iterable[Any]) -> TinyPrefs:
        if values is None:
            raise TypeError(f"Cannot store None for '{key}'; use remove() instead")
        return self._stage(Entry.string(key, codec.encode_list(values)))

    def get_list(self, key: str, element_type: Any = None, default: Any = None) -> Any:
        """Decode the JSON array at *key* into a list of plain values.

        *element_type* is accepted for call-site symmetry with
        :meth:`get_object` but is not applied: elements come back as dicts,
        lists and primitives.  Use ``get_object(key, list[Model])`` for typed
        elements.

        Raises:
            DecodeError: If the stored text is not a JSON array.
        """
        text = self._get(key, "string", None)
        if text is None:
            return default
        return codec.decode_list(text)

    # ── media ────────────────────────────────────────────────

    def put_image(self, key: str, image: Image.Image, format: str = "PNG") -> TinyPrefs:
        if image is None:
            raise TypeError(f"Cannot store None for '{key}'; use remove() instead")
        return self._stage(Entry.string(key, codec.encode_image(image, format)))

    def get_image(self, key: str, default: Any = None) -> Any:
        """Return the stored image, or *default* when absent or corrupt."""
        text = self._get(key, "string", None)
        if text is None:
            return default
        image = codec.decode_image(text)
        return default if image is None else image

    def put_locator(self, key: str, locator: httpx.URL | str) -> TinyPrefs:
        if locator is None:
            raise TypeError(f"Cannot store None for '{key}'; use remove() instead")
        return self._stage(Entry.string(key, codec.encode_locator(locator)))

    def get_locator(self, key: str) -> httpx.URL:
        """Return the stored URL, or the empty URL when absent or unparsable."""
        return codec.decode_locator(self._get(key, "string", ""))

    # ── buffer management ────────────────────────────────────

    def remove(self, key: str) -> TinyPrefs:
        with self._lock:
            self._pending[key] = None
        return self

    def clear(self) -> TinyPrefs:
        """Stage removal of every key, including earlier staged writes."""
        with self._lock:
            self._pending.clear()
            self._cleared = True
        return self

    def contains(self, key: str) -> bool:
        return self._lookup(key) is not None

    def keys(self) -> list[str]:
        return sorted(self._snapshot())

    def get_all(self) -> dict[str, Any]:
        """Return every visible key with its raw primitive value."""
        return {
            key: set(entry.value) if entry.kind == "string_set" else entry.value
            for key, entry in self._snapshot().items()
        }

    def commit(self) -> None:
        """Flush all staged mutations to the store as one batch.

        A commit with nothing staged does nothing.  If the store rejects the
        batch the staged mutations are kept and the error propagates.
        """
        with self._lock:
            if not self._pending and not self._cleared:
                return
            self._store.commit(dict(self._pending), clear=self._cleared)
            logger.debug(
                "Committed %d mutation(s) to namespace '%s'%s",
                len(self._pending),
                self._store.namespace,
                " after clear" if self._cleared else "",
            )
            self._pending.clear()
            self._cleared = False

    # ── internals ────────────────────────────────────────────

    def _stage(self, entry: Entry) -> TinyPrefs:
        with self._lock:
            self._pending[entry.key] = entry
        return self

    def _lookup(self, key: str) -> Entry | None:
        with self._lock:
            if key in self._pending:
                return self._pending[key]
            if self._cleared:
                return None
            return self._store.read(key)

    def _get(self, key: str, kind: Kind, default: Any) -> Any:
        entry = self._lookup(key)
        if entry is None:
            return default
        if entry.kind != kind:
            raise CategoryMismatchError(key, kind, entry.kind)
        return entry.value

    def _snapshot(self) -> dict[str, Entry]:
        with self._lock:
            entries = {} if self._cleared else self._store.read_all()
            for key, entry in self._pending.items():
                if entry is None:
                    entries.pop(key, None)
                else:
                    entries[key] = entry
        return entries
