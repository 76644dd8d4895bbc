"""
Ordered entry store for one dictionary partition.

Entries are kept in a dict keyed by headword. The sorted key list is
rebuilt lazily the first time ordered access is needed after a
headword was inserted or removed; dictionary files are usually already
sorted, so re-sorting is close to linear.

Okuri-ari entries are ordered by descending headword, okuri-nasi
entries by ascending headword.
"""

import bisect
from typing import Callable, Dict, Iterator, List, Optional

from skkdic_expr.entry import Entry

Visitor = Callable[[Entry], bool]


class EntryStore:
    """
    Headword-keyed collection of entries with a fixed iteration order.

    Args:
        reverse: If True, the native order is descending headword order
    """

    def __init__(self, reverse: bool = False):
        self.reverse = reverse
        self._entries: Dict[str, Entry] = {}
        self._keys: Optional[List[str]] = None  # ascending, None when stale

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, headword: str) -> bool:
        return headword in self._entries

    def __iter__(self) -> Iterator[Entry]:
        """Iterate entries in native order."""
        keys = self._sorted_keys()
        if self.reverse:
            keys = reversed(keys)
        for key in keys:
            yield self._entries[key]

    def _sorted_keys(self) -> List[str]:
        if self._keys is None:
            self._keys = sorted(self._entries)
        return self._keys

    def get(self, headword: str) -> Optional[Entry]:
        return self._entries.get(headword)

    def upsert(self, headword: str) -> Entry:
        """Return the entry for ``headword``, inserting an empty one if needed."""
        entry = self._entries.get(headword)
        if entry is None:
            entry = Entry(headword)
            self._entries[headword] = entry
            self._keys = None
        return entry

    def delete(self, headword: str) -> None:
        if self._entries.pop(headword, None) is not None:
            self._keys = None

    def clear(self) -> None:
        self._entries.clear()
        self._keys = None

    def headwords(self) -> List[str]:
        """All headwords in native order."""
        keys = self._sorted_keys()
        return list(reversed(keys)) if self.reverse else list(keys)

    def ascend(self, visitor: Visitor) -> None:
        """
        Visit every entry in native order.

        The visitor returns False to stop the traversal. Entries may not be
        inserted or deleted from inside the visitor.
        """
        for entry in self:
            if not visitor(entry):
                return

    def range_from(self, low: str, high: str, visitor: Visitor) -> None:
        """
        Visit entries from ``low`` (inclusive) towards ``high`` (exclusive).

        The scan runs in native order: for an ascending store it covers
        ``low <= key < high``, for a descending one ``high < key <= low``.
        The visitor returns False to stop early.
        """
        keys = self._sorted_keys()
        if self.reverse:
            i = bisect.bisect_right(keys, low) - 1
            while i >= 0 and keys[i] > high:
                if not visitor(self._entries[keys[i]]):
                    return
                i -= 1
        else:
            i = bisect.bisect_left(keys, low)
            while i < len(keys) and keys[i] < high:
                if not visitor(self._entries[keys[i]]):
                    return
                i += 1
