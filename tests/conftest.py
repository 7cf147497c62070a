"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from tinyprefs import TinyPrefs, handle
from tinyprefs.stores import InMemoryStore, SQLiteStore


@dataclass
class Address:
    street: str
    city: str


@dataclass
class Profile:
    name: str
    age: int
    tags: list[str] = field(default_factory=list)
    address: Address | None = None
    scores: dict[str, float] = field(default_factory=dict)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def prefs(store):
    return TinyPrefs(store)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "prefs.db")


@pytest.fixture
def sqlite_store(db_path):
    s = SQLiteStore(db_path)
    yield s
    s.close()


@pytest.fixture
def profile():
    return Profile(
        name="Ada",
        age=36,
        tags=["math", "engines"],
        address=Address(street="12 St James's Square", city="London"),
        scores={"analysis": 9.5},
    )


@pytest.fixture(autouse=True)
def fresh_handle(monkeypatch):
    monkeypatch.setattr(handle, "_instance", None)
