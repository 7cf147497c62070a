"""Process-wide shared TinyPrefs instance."""

from __future__ import annotations

import logging
import threading

from tinyprefs.config import StoreConfig
from tinyprefs.prefs import TinyPrefs
from tinyprefs.stores import create_store

logger = logging.getLogger(__name__)

NAMESPACE = "TinyPrefs"

_instance: TinyPrefs | None = None
_lock = threading.Lock()


def acquire(config: StoreConfig | None = None) -> TinyPrefs:
    """Return the process-wide :class:`TinyPrefs`, creating it on first call.

    The first call opens the store described by *config* (in-memory when
    omitted) under the ``NAMESPACE`` namespace.  Later calls return the same
    instance and ignore *config*.  The instance is shared by every caller and
    lives until the process exits.

    Raises:
        StoreUnavailableError: If the store cannot be opened.  No instance is
            kept, so a later call retries.
    """
    global _instance
    instance = _instance
    if instance is not None:
        return instance
    with _lock:
        if _instance is None:
            config = config or StoreConfig()
            _instance = TinyPrefs(create_store(config, NAMESPACE))
            logger.info("Opened %s preference store '%s'", config.type, NAMESPACE)
        return _instance
