"""Store configuration.

Selects which primitive store backend the process-wide handle is bound to.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class StoreConfig(BaseModel):
    """Backend configuration for :func:`tinyprefs.acquire`.

    Attributes:
        type: Store type ("memory" or "sqlite")
        path: Path to SQLite database file (for sqlite type)
    """

    type: Literal["memory", "sqlite"] = "memory"
    path: str = ""
