"""
Tests for trie.py - marisa-trie completion index.
"""

import pytest

from skkdic_expr.trie import (
    build_completion_trie,
    load_completion_trie,
    save_completion_trie,
    trie_complete,
    trie_contains,
)


@pytest.fixture
def filled(dic):
    for line in ["あい /愛/", "あう /会う/", "あか /赤/", "かき /柿/", "あr /有/"]:
        dic.merge_line(line)
    return dic


def test_matches_dictionary_complete(filled):
    trie = build_completion_trie(filled)
    for prefix in ["あ", "か", "あい", "z", ""]:
        assert trie_complete(trie, prefix) == filled.complete(prefix)


def test_okuri_ari_not_indexed(filled):
    trie = build_completion_trie(filled)
    assert not trie_contains(trie, "あr")
    assert trie_contains(trie, "かき")


def test_save_and_load(filled, tmp_path):
    path = tmp_path / "completion.marisa"
    save_completion_trie(filled, path)
    trie = load_completion_trie(path)
    assert trie_complete(trie, "あ") == ["あい", "あう", "あか"]


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_completion_trie(tmp_path / "missing.marisa")
