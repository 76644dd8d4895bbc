"""
Dictionary entry: one headword and its candidates.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set

from skkdic_expr.candidates import Candidate
from skkdic_expr.characters import is_okuri_ari


@dataclass
class Entry:
    """
    A headword with its deduplicated candidate list.

    Candidates keep first-seen order and unique texts. ``_marks`` is only
    populated while an intersection is being folded.
    """
    headword: str
    candidates: List[Candidate] = field(default_factory=list)
    _marks: Optional[Set[str]] = field(default=None, init=False, repr=False, compare=False)

    @property
    def is_okuri_ari(self) -> bool:
        return is_okuri_ari(self.headword)

    def __len__(self) -> int:
        return len(self.candidates)

    def find(self, text: str) -> int:
        """Index of the candidate with this text, or -1."""
        for i, c in enumerate(self.candidates):
            if c.text == text:
                return i
        return -1

    def add_candidate(self, candidate: Candidate, delimiter: str) -> None:
        """
        Add a candidate, joining annotations if the text is already present.

        The entry stores its own copy; ``candidate`` is never modified.
        """
        i = self.find(candidate.text)
        if i >= 0:
            self.candidates[i].join_annotation(candidate.annotation, delimiter)
        else:
            self.candidates.append(candidate.copy())

    def remove_candidate_at(self, i: int) -> None:
        if i < 0 or i >= len(self.candidates):
            return
        del self.candidates[i]

    def remove_candidate(self, text: str) -> None:
        self.remove_candidate_at(self.find(text))

    def mark_intersection(self, text: str) -> None:
        """Mark a candidate text as present in the source being intersected."""
        if self.find(text) < 0:
            return
        if self._marks is None:
            self._marks = set()
        self._marks.add(text)

    def finalize_intersection(self) -> None:
        """Keep only marked candidates and reset the marks."""
        marks = self._marks or set()
        self.candidates = [c for c in self.candidates if c.text in marks]
        self._marks = None
