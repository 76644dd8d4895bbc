"""
Tests for store.py - ordered partitions.
"""

from skkdic_expr.settings import MAX_RUNE
from skkdic_expr.store import EntryStore


def fill(store, *headwords):
    for h in headwords:
        store.upsert(h)
    return store


class TestOrdering:

    def test_ascending(self):
        store = fill(EntryStore(), "か", "あ", "さ")
        assert store.headwords() == ["あ", "か", "さ"]
        assert [e.headword for e in store] == ["あ", "か", "さ"]

    def test_descending(self):
        store = fill(EntryStore(reverse=True), "か", "あ", "さ")
        assert store.headwords() == ["さ", "か", "あ"]

    def test_order_after_delete_and_insert(self):
        store = fill(EntryStore(), "b", "d")
        store.headwords()
        store.delete("b")
        store.upsert("a")
        store.upsert("c")
        assert store.headwords() == ["a", "c", "d"]

    def test_ascend_stops(self):
        store = fill(EntryStore(), "a", "b", "c")
        seen = []

        def visit(entry):
            seen.append(entry.headword)
            return entry.headword != "b"

        store.ascend(visit)
        assert seen == ["a", "b"]


class TestAccess:

    def test_upsert_returns_existing(self):
        store = EntryStore()
        first = store.upsert("あ")
        assert store.upsert("あ") is first
        assert len(store) == 1

    def test_get_missing(self):
        assert EntryStore().get("あ") is None

    def test_delete(self):
        store = fill(EntryStore(), "あ")
        store.delete("あ")
        store.delete("あ")
        assert "あ" not in store
        assert len(store) == 0


class TestRangeFrom:

    def test_ascending_range(self):
        store = fill(EntryStore(), "あい", "あう", "あか", "かき")
        seen = []
        store.range_from("あ", "あ" + MAX_RUNE, lambda e: seen.append(e.headword) or True)
        assert seen == ["あい", "あう", "あか"]

    def test_descending_range(self):
        store = fill(EntryStore(reverse=True), "a", "b", "c", "d")
        seen = []
        store.range_from("c", "a", lambda e: seen.append(e.headword) or True)
        assert seen == ["c", "b"]

    def test_empty_store(self):
        seen = []
        EntryStore().range_from("a", "b", lambda e: seen.append(e) or True)
        assert seen == []
