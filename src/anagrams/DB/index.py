from __future__ import annotations
import logging
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Tuple

from ..models import Dictionary, Occurrences, Word
from ..occurrences import word_occurrences

log = logging.getLogger(__name__)


class DictionaryIndex:
    """
    Dictionary words grouped by their occurrence signature.

    Built once from a Dictionary and read-only afterwards, so one instance can
    be shared by any number of threads (or pickled to worker processes).
    Lookups of an unknown signature return () rather than raising.
    """
    def __init__(self, groups: Dict[Occurrences, Tuple[Word, ...]] | None = None) -> None:
        self._groups: Dict[Occurrences, Tuple[Word, ...]] = dict(groups or {})
        self._num_words: int = sum(len(ws) for ws in self._groups.values())

    # ---- Build (offline) ----
    @classmethod
    def build(cls, dictionary: Dictionary | Iterable[Word]) -> "DictionaryIndex":
        words = dictionary.words if isinstance(dictionary, Dictionary) else dictionary
        buckets: Dict[Occurrences, List[Word]] = defaultdict(list)
        for w in words:
            buckets[word_occurrences(w)].append(w)
        idx = cls({sig: tuple(ws) for sig, ws in buckets.items()})
        log.info("Indexed %d words under %d signatures", idx._num_words, len(idx))
        return idx

    # ---- Query ----
    def lookup(self, occurrences: Occurrences) -> Tuple[Word, ...]:
        return self._groups.get(occurrences, ())

    def word_anagrams(self, word: Word) -> Tuple[Word, ...]:
        """All dictionary words with the same letters as `word` (itself included if listed)."""
        return self.lookup(word_occurrences(word))

    # ---- Getters ----
    def signatures(self) -> Iterator[Occurrences]:
        return iter(self._groups)

    @property
    def num_words(self) -> int:
        return self._num_words

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, occurrences: object) -> bool:
        return occurrences in self._groups


def build_dictionary_index(dictionary: Dictionary | Iterable[Word]) -> DictionaryIndex:
    return DictionaryIndex.build(dictionary)
