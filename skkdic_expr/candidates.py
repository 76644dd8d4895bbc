"""
Candidate list codec for SKK dictionary lines.

A dictionary line looks like:

    さしみ /刺身;raw fish/差し身/

The part after the headword is a slash-delimited candidate list. Each
candidate may carry an annotation after the first ``;``. Segments that
start with ``[`` are okurigana blocks (``/[く/悪/]/``) and are skipped.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple


@dataclass(slots=True)
class Candidate:
    """
    One conversion candidate of a headword.

    Attributes:
        text: The candidate text (merge identity)
        annotation: Explanatory annotation, empty if none
    """
    text: str
    annotation: str = ""

    def __str__(self) -> str:
        if not self.annotation:
            return self.text
        return f"{self.text};{self.annotation}"

    def copy(self) -> "Candidate":
        return Candidate(self.text, self.annotation)

    def join_annotation(self, annotation: str, delimiter: str) -> None:
        """
        Merge another annotation for the same candidate text.

        Empty annotations are ignored and identical annotations are
        not repeated.
        """
        if not annotation:
            return

        if not self.annotation:
            self.annotation = annotation
        elif self.annotation != annotation:
            self.annotation += delimiter + annotation


# ============================================================================
# Decoding
# ============================================================================

def _iter_segments(s: str) -> Iterator[Tuple[int, int]]:
    """Yield (start, end) spans of the real candidate segments in ``s``."""
    n = len(s)
    p = 0
    while p < n and s[p] >= " ":
        if s[p] != "/":
            p += 1
            continue

        p += 1
        q = p
        if q >= n or s[q] < " ":
            break

        if s[q] == "[":
            # okurigana block, resume after the closing bracket
            while q < n and s[q] != "]":
                q += 1
            p = q
            continue

        while q < n and s[q] != "/" and s[q] >= " ":
            q += 1
        if p == q:
            continue

        yield p, q
        p = q


def parse_candidates(s: str) -> List[Candidate]:
    """
    Parse the candidate list part of a dictionary line.

    Args:
        s: Text following the headword and its separating space

    Returns:
        List of Candidate objects in line order. Empty if the list holds
        no real candidates.
    """
    candidates = []
    for start, end in _iter_segments(s):
        text, _, annotation = s[start:end].partition(";")
        candidates.append(Candidate(text, annotation))
    return candidates


def parse_line(line: str) -> Tuple[str, List[Candidate]]:
    """
    Split a dictionary line into its headword and candidates.

    Returns ``("", [])`` when the line has no space separator, an empty
    headword, or no candidates.
    """
    headword, sep, rest = line.partition(" ")
    if not sep or not headword:
        return "", []

    candidates = parse_candidates(rest)
    if not candidates:
        return "", []

    return headword, candidates


# ============================================================================
# Encoding
# ============================================================================

def join_candidates(candidates: Sequence[Candidate]) -> str:
    """Serialize candidates back into ``/c1/c2;note/`` form."""
    if not candidates:
        return "//"
    return "/" + "/".join(str(c) for c in candidates) + "/"


def format_line(headword: str, candidates: Sequence[Candidate]) -> str:
    return f"{headword} {join_candidates(candidates)}"
