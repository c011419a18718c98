from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

Word = str
Sentence = Tuple[Word, ...]             # order matters: ("my", "sane") != ("sane", "my")
Occurrence = Tuple[str, int]            # (lowercase char, positive count)
Occurrences = Tuple[Occurrence, ...]    # sorted by char, no zero counts

EMPTY: Occurrences = ()

@dataclass(frozen=True)
class Dictionary:
    words: Tuple[Word, ...]
    sources: Tuple[str, ...] = field(default=())   # files the words were read from

    def __len__(self) -> int:
        return len(self.words)
