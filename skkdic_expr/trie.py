"""
Completion index for okuri-nasi headwords.

Freezes the okuri-nasi headwords of a Dictionary into a marisa_trie.Trie.
The trie can be saved next to the dictionary and memory-mapped later for
prefix completion without re-reading the source files.
"""

import logging
from pathlib import Path
from typing import List, Union

import marisa_trie

from skkdic_expr.dictionary import Dictionary

logger = logging.getLogger(__name__)


def build_completion_trie(dic: Dictionary) -> marisa_trie.Trie:
    """Build a trie of every okuri-nasi headword in ``dic``."""
    trie = marisa_trie.Trie(dic.okuri_nashi.headwords())
    logger.debug(f"Built completion trie with {len(trie)} headwords")
    return trie


def save_completion_trie(dic: Dictionary, path: Union[str, Path]) -> marisa_trie.Trie:
    """
    Build the completion trie and save it to ``path``.

    Returns:
        The saved trie
    """
    trie = build_completion_trie(dic)
    trie.save(str(path))
    logger.info(f"Saved completion index to {path} ({len(trie)} headwords)")
    return trie


def load_completion_trie(path: Union[str, Path]) -> marisa_trie.Trie:
    """
    Memory-map a saved completion trie.

    Raises:
        FileNotFoundError: If the index file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Completion index not found at {path}")

    trie = marisa_trie.Trie()
    trie.mmap(str(path))
    return trie


def trie_complete(trie: marisa_trie.Trie, prefix: str) -> List[str]:
    """Headwords starting with ``prefix``, in ascending order."""
    return sorted(trie.keys(prefix))


def trie_contains(trie: marisa_trie.Trie, headword: str) -> bool:
    return headword in trie
