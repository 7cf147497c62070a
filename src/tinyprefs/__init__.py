"""tinyprefs — typed, persistent key-value preferences.

Strings, numbers, booleans and string sets go straight to a primitive store;
objects and lists travel as JSON, images as base64 PNG and locators as URL
strings.  Writes are buffered until ``commit()``.
"""

from tinyprefs.config import StoreConfig
from tinyprefs.exceptions import (
    CategoryMismatchError,
    DecodeError,
    EncodeError,
    StoreError,
    StoreUnavailableError,
    TinyPrefsError,
)
from tinyprefs.handle import acquire
from tinyprefs.prefs import TinyPrefs

__all__ = [
    "CategoryMismatchError",
    "DecodeError",
    "EncodeError",
    "StoreConfig",
    "StoreError",
    "StoreUnavailableError",
    "TinyPrefs",
    "TinyPrefsError",
    "acquire",
]
