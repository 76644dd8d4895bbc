"""
SKK dictionary with union, difference and intersection merging.

A Dictionary holds two ordered partitions:
- okuri-ari entries, written in descending headword order
- okuri-nasi entries, written in ascending headword order

Sources are folded in one at a time with a MergeMode:

    dic = Dictionary()
    dic.read_file("SKK-JISYO.L")                        # union
    dic.read_file("SKK-JISYO.jinmei", MergeMode.SUB)    # difference
    dic.read_file("SKK-JISYO.geo", MergeMode.AND)       # intersection
    dic.write_file("SKK-JISYO.out")

Intersection works in two steps: every AND merge marks the candidates it
shares with the store, then finalize_intersection() drops everything
unmarked. read()/read_file() in AND mode finalize when the source is
exhausted. Callers using and_candidates() directly must call
finalize_intersection() themselves once all lines of the source are in.
"""

import codecs
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Optional, Sequence, Union

from skkdic_expr import settings
from skkdic_expr.candidates import Candidate, format_line, parse_line
from skkdic_expr.characters import is_okuri_ari
from skkdic_expr.encodings import Encoding, coding_cookie, extract_encoding
from skkdic_expr.exceptions import DictionaryReadError, DictionaryWriteError
from skkdic_expr.store import EntryStore

logger = logging.getLogger(__name__)


class MergeMode(Enum):
    """How incoming candidates combine with the stored ones."""
    ADD = "+"  # union
    SUB = "-"  # difference
    AND = "^"  # intersection

    @classmethod
    def from_prefix(cls, ch: str) -> Optional["MergeMode"]:
        """Map a command line prefix character to its mode."""
        for mode in cls:
            if mode.value == ch:
                return mode
        return None


# ============================================================================
# Options
# ============================================================================

@dataclass
class ReadOptions:
    """
    Options for reading a dictionary source.

    Attributes:
        encoding: Input encoding. AUTO reads the coding cookie on the first
            line. Unknown names fall back to AUTO.
    """
    encoding: Union[Encoding, str] = Encoding.AUTO

    def __post_init__(self):
        encoding = Encoding.parse(self.encoding)
        if encoding is None:
            if self.encoding:
                logger.warning(f"Unknown input encoding {self.encoding!r}, using coding cookie")
            encoding = Encoding.AUTO
        self.encoding = encoding


@dataclass
class WriteOptions:
    """
    Options for writing a dictionary.

    Attributes:
        encoding: Output encoding, also named in the coding cookie. Unknown
            names (and AUTO) fall back to UTF-8.
    """
    encoding: Union[Encoding, str] = field(default_factory=lambda: settings.DEFAULT_OUTPUT_ENCODING)

    def __post_init__(self):
        encoding = Encoding.parse(self.encoding)
        if encoding is None or not encoding.is_valid:
            if self.encoding:
                logger.warning(f"Unknown output encoding {self.encoding!r}, using utf-8")
            encoding = Encoding.UTF8
        self.encoding = encoding


@dataclass
class ReadStats:
    """Line counts from folding one source into a dictionary."""
    merged: int = 0
    skipped: int = 0
    comments: int = 0


# ============================================================================
# Dictionary
# ============================================================================

class Dictionary:
    """
    An SKK dictionary built by merging sources.

    Args:
        delimiter: Joins differing annotations of the same candidate text
    """

    def __init__(self, delimiter: Optional[str] = None):
        if delimiter is None:
            delimiter = settings.DEFAULT_DELIMITER
        self.delimiter = delimiter
        self.okuri_ari = EntryStore(reverse=True)
        self.okuri_nashi = EntryStore()

    def __len__(self) -> int:
        return len(self.okuri_ari) + len(self.okuri_nashi)

    def __contains__(self, headword: str) -> bool:
        return headword in self._store_for(headword)

    def __repr__(self) -> str:
        return (f"<Dictionary okuri_ari={len(self.okuri_ari)} "
                f"okuri_nashi={len(self.okuri_nashi)}>")

    def _store_for(self, headword: str) -> EntryStore:
        if is_okuri_ari(headword):
            return self.okuri_ari
        return self.okuri_nashi

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def merge(self, headword: str, candidates: Sequence[Candidate], mode: MergeMode = MergeMode.ADD) -> None:
        """
        Fold one headword's candidates into the dictionary.

        An empty headword or candidate list is ignored. ``candidates`` is
        only read, never modified or retained.
        """
        if not headword or not candidates:
            return

        store = self._store_for(headword)

        if mode is MergeMode.SUB:
            _sub_entry(store, headword, candidates)
        elif mode is MergeMode.AND:
            _and_entry(store, headword, candidates)
        else:
            _add_entry(store, headword, candidates, self.delimiter)

    def add_candidates(self, headword: str, candidates: Sequence[Candidate]) -> None:
        self.merge(headword, candidates, MergeMode.ADD)

    def sub_candidates(self, headword: str, candidates: Sequence[Candidate]) -> None:
        self.merge(headword, candidates, MergeMode.SUB)

    def and_candidates(self, headword: str, candidates: Sequence[Candidate]) -> None:
        """Mark shared candidates. Call finalize_intersection() afterwards."""
        self.merge(headword, candidates, MergeMode.AND)

    def remove_candidates(self, headword: str) -> None:
        """Delete a headword and all of its candidates."""
        self._store_for(headword).delete(headword)

    def finalize_intersection(self) -> int:
        """
        Complete an intersection fold.

        Drops every unmarked candidate in both partitions, clears the marks
        and removes entries left empty.

        Returns:
            Number of entries removed
        """
        removed = _clean_entries(self.okuri_ari) + _clean_entries(self.okuri_nashi)
        logger.debug(f"Intersection removed {removed} entries")
        return removed

    def merge_line(self, line: str, mode: MergeMode = MergeMode.ADD) -> bool:
        """
        Parse one dictionary line and merge it.

        Returns:
            False if the line is malformed and was skipped
        """
        headword, candidates = parse_line(line)
        if not headword:
            return False
        self.merge(headword, candidates, mode)
        return True

    def merge_lines(self, lines: Iterable[str], mode: MergeMode = MergeMode.ADD) -> ReadStats:
        """
        Merge dictionary lines, skipping comments and malformed lines.

        In AND mode the lines form one intersection source and are
        finalized once all of them are merged.
        """
        stats = ReadStats()
        for line in lines:
            line = line.rstrip("\r\n")
            if line.startswith(settings.COMMENT_PREFIX):
                stats.comments += 1
                continue
            if self.merge_line(line, mode):
                stats.merged += 1
            elif line:
                stats.skipped += 1
                logger.debug(f"Skipping malformed line: {line!r}")

        if mode is MergeMode.AND:
            self.finalize_intersection()

        return stats

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read(self, source: BinaryIO, mode: MergeMode = MergeMode.ADD,
             options: Optional[ReadOptions] = None) -> ReadStats:
        """
        Fold a dictionary stream into this dictionary.

        Args:
            source: Binary stream of dictionary bytes. A text stream is
                accepted too and is used as already decoded.
            mode: Merge mode for every line of the source
            options: Read options (input encoding)

        Returns:
            ReadStats for the source

        Raises:
            DictionaryReadError: If the stream fails or cannot be decoded.
                Lines merged before the failure stay merged.
        """
        if source is None:
            raise ValueError("source is None")
        if options is None:
            options = ReadOptions()

        try:
            stats = self.merge_lines(_decode_lines(source, options.encoding), mode)
        except (OSError, UnicodeDecodeError) as err:
            raise DictionaryReadError(f"failed to read dictionary: {err}") from err

        return stats

    def read_file(self, path: Union[str, Path], mode: MergeMode = MergeMode.ADD,
                  options: Optional[ReadOptions] = None) -> ReadStats:
        """Fold a dictionary file into this dictionary."""
        if path is None:
            raise ValueError("path is None")

        try:
            f = open(path, "rb")
        except OSError as err:
            raise DictionaryReadError(f"failed to open {path}: {err}") from err

        with f:
            try:
                stats = self.read(f, mode, options)
            except DictionaryReadError as err:
                raise DictionaryReadError(f"{path}: {err}") from err.__cause__

        logger.info(f"Read {path} ({mode.name}): {stats.merged} lines merged, "
                    f"{stats.skipped} skipped, {len(self)} entries")
        return stats

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, headword: str) -> Optional[List[Candidate]]:
        """
        Get the candidates for a headword.

        Returns:
            The entry's candidate list, or None if the headword is absent
        """
        entry = self._store_for(headword).get(headword)
        if entry is None:
            return None
        return entry.candidates

    def complete(self, prefix: str) -> List[str]:
        """
        List okuri-nasi headwords starting with ``prefix``, ascending.

        Okuri-ari headwords are never completed.
        """
        completion = []

        def visit(entry) -> bool:
            if entry.headword.startswith(prefix):
                completion.append(entry.headword)
                return True
            return False

        self.okuri_nashi.range_from(prefix, prefix + settings.MAX_RUNE, visit)
        return completion

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def iter_lines(self, encoding: Encoding = Encoding.UTF8) -> Iterator[str]:
        """Yield the serialized dictionary line by line, without newlines."""
        yield coding_cookie(encoding)
        yield settings.OKURI_ARI_HEADER
        for entry in self.okuri_ari:
            yield format_line(entry.headword, entry.candidates)
        yield settings.OKURI_NASI_HEADER
        for entry in self.okuri_nashi:
            yield format_line(entry.headword, entry.candidates)

    def dumps(self, encoding: Union[Encoding, str] = Encoding.UTF8) -> str:
        """Serialize to text. ``encoding`` only affects the coding cookie."""
        encoding = WriteOptions(encoding).encoding
        return "".join(line + "\n" for line in self.iter_lines(encoding))

    def write(self, output: BinaryIO, options: Optional[WriteOptions] = None) -> None:
        """
        Serialize the dictionary to a binary stream.

        Raises:
            DictionaryWriteError: If a candidate cannot be represented in the
                output encoding or the stream fails
        """
        if options is None:
            options = WriteOptions()
        encoding = options.encoding

        encoder = codecs.getincrementalencoder(encoding.codec)(encoding.errors)
        try:
            for line in self.iter_lines(encoding):
                output.write(encoder.encode(line + "\n"))
            output.write(encoder.encode("", final=True))
            output.flush()
        except (OSError, UnicodeEncodeError) as err:
            raise DictionaryWriteError(f"failed to write dictionary: {err}") from err

    def write_file(self, path: Union[str, Path], options: Optional[WriteOptions] = None) -> None:
        try:
            f = open(path, "wb")
        except OSError as err:
            raise DictionaryWriteError(f"failed to create output file: {path}: {err}") from err

        with f:
            self.write(f, options)

        logger.info(f"Wrote {len(self)} entries to {path}")


# ============================================================================
# Merge helpers
# ============================================================================

def _add_entry(store: EntryStore, headword: str, candidates: Sequence[Candidate], delimiter: str) -> None:
    entry = store.upsert(headword)
    for c in candidates:
        entry.add_candidate(c, delimiter)


def _sub_entry(store: EntryStore, headword: str, candidates: Sequence[Candidate]) -> None:
    entry = store.get(headword)
    if entry is None:
        return

    for c in candidates:
        entry.remove_candidate(c.text)
        if not entry.candidates:
            store.delete(headword)
            break


def _and_entry(store: EntryStore, headword: str, candidates: Sequence[Candidate]) -> None:
    # Headwords missing from the store are simply not part of the result
    entry = store.get(headword)
    if entry is None:
        return

    for c in candidates:
        entry.mark_intersection(c.text)


def _clean_entries(store: EntryStore) -> int:
    empty = []
    for entry in store:
        entry.finalize_intersection()
        if not entry.candidates:
            empty.append(entry.headword)

    for headword in empty:
        store.delete(headword)

    return len(empty)


# ============================================================================
# Decoding
# ============================================================================

def _decode_lines(source, encoding: Encoding) -> Iterator[str]:
    """
    Decode a dictionary stream into text lines.

    With AUTO encoding, the first line's coding cookie selects the codec.
    Without a recognized cookie the bytes are read as UTF-8.
    """
    first = source.readline()
    if not first:
        return

    if isinstance(first, str):
        yield first
        yield from source
        return

    if encoding is Encoding.AUTO:
        encoding = extract_encoding(first.decode("latin-1")) or Encoding.AUTO
        logger.debug(f"Coding cookie selects {encoding.codec}")

    decoder = codecs.getincrementaldecoder(encoding.codec)(encoding.errors)
    yield decoder.decode(first)
    for raw in source:
        yield decoder.decode(raw)

    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail
