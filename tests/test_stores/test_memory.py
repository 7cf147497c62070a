"""Tests for InMemoryStore."""

import pytest

from tinyprefs.entry import Entry
from tinyprefs.exceptions import CategoryMismatchError
from tinyprefs.stores import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore("ns")


def test_read_nonexistent(store):
    assert store.read("key") is None


def test_commit_and_read(store):
    store.commit({"k": Entry.string("k", "v")})
    assert store.read("k") == Entry("k", "string", "v")


def test_overwrite(store):
    store.commit({"k": Entry.int32("k", 1)})
    store.commit({"k": Entry.int32("k", 2)})
    assert store.get_int("k") == 2


def test_none_mutation_deletes(store):
    store.commit({"k": Entry.boolean("k", True)})
    store.commit({"k": None})
    assert store.read("k") is None


def test_delete_nonexistent(store):
    store.commit({"nope": None})  # should not raise
    assert store.read_all() == {}


def test_clear_then_apply(store):
    store.commit({"a": Entry.string("a", "1"), "b": Entry.string("b", "2")})
    store.commit({"c": Entry.string("c", "3")}, clear=True)
    assert sorted(store.read_all()) == ["c"]


def test_typed_getters(store):
    store.commit(
        {
            "s": Entry.string("s", "text"),
            "i": Entry.int32("i", 7),
            "l": Entry.int64("l", 2**40),
            "f": Entry.float_("f", 1.5),
            "b": Entry.boolean("b", True),
            "set": Entry.string_set("set", {"x", "y"}),
        }
    )
    assert store.get_string("s") == "text"
    assert store.get_int("i") == 7
    assert store.get_long("l") == 2**40
    assert store.get_float("f") == 1.5
    assert store.get_boolean("b") is True
    assert store.get_string_set("set") == {"x", "y"}
    assert store.contains("s")
    assert not store.contains("missing")


def test_typed_getter_defaults(store):
    default = {"keep"}
    assert store.get_string("missing", "fallback") == "fallback"
    assert store.get_int("missing", -1) == -1
    assert store.get_string_set("missing", default) is default


def test_kind_mismatch(store):
    store.commit({"k": Entry.string("k", "v")})
    with pytest.raises(CategoryMismatchError) as exc_info:
        store.get_int("k")
    assert exc_info.value.expected == "int"
    assert exc_info.value.actual == "string"


def test_namespace_isolation():
    a = InMemoryStore("ns1")
    b = InMemoryStore("ns2")
    a.commit({"k": Entry.int32("k", 1)})
    assert b.read("k") is None
    assert a.namespace == "ns1"
