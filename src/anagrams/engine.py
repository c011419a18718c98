# anagrams/engine.py
from __future__ import annotations

import os
import logging
from typing import Dict, Iterable, List, Optional

from .models import Sentence, Word
from .loader import load_dictionary
from .normalize import split_sentence
from .search import sentence_anagrams
from .DB.index import DictionaryIndex
from .DB.storage import save_index, load_index

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - dictionary loading (loader.load_dictionary),
      - the signature index (DictionaryIndex),
      - the backtracking search (search.sentence_anagrams).

    Public API (used by CLI/Flask):
      * build(roots, ...): load words -> index -> (optional) persist
      * load(cache=...):   load a pickled index
      * word_anagrams(word) / sentence_anagrams(sentence)
      * shutdown():        drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[DictionaryIndex] = None

    # /* ~~~ Build an index from dictionary files ~~~ */
    def build(
        self,
        roots: Iterable[str],
        *,
        cache: Optional[str] = None,           # path to pickle the built index to
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["ANAGRAMS_VERBOSE"] = "1"

        roots = list(roots)
        if not roots:
            raise ValueError("build(): at least one dictionary file or folder is required")

        log.info("Loading dictionary from %s", roots)
        dictionary = load_dictionary(roots)

        log.info("Building signature index")
        idx = DictionaryIndex.build(dictionary)

        if cache:
            log.info("Saving pickle index to %s", cache)
            save_index(idx, cache)

        self.index = idx
        log.info("Engine build() complete: words=%d signatures=%d", idx.num_words, len(idx))

    # /* ~~~ Load an already-built index ~~~ */
    def load(self, *, cache: Optional[str] = None, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["ANAGRAMS_VERBOSE"] = "1"

        if not cache:
            raise ValueError("load(): require --cache to load an index")
        if not os.path.exists(cache):
            raise FileNotFoundError(cache)

        log.info("Loading pickle index from %s", cache)
        self.index = load_index(cache)
        log.info("Engine load() complete: words=%d signatures=%d",
                 self.index.num_words, len(self.index))

    # ------------- query -------------

    def word_anagrams(self, word: Word) -> List[Word]:
        return list(self._require_index().word_anagrams(word))

    # /* ~~~ Accepts a word sequence or free text ("Yes, man!") ~~~ */
    def sentence_anagrams(
        self,
        sentence: str | Iterable[Word],
        *,
        workers: Optional[int] = None,
        mode: Optional[str] = None,
    ) -> List[Sentence]:
        idx = self._require_index()
        words = split_sentence(sentence) if isinstance(sentence, str) else tuple(sentence)
        return sentence_anagrams(idx, words, workers=workers, mode=mode)

    def stats(self) -> Dict[str, int]:
        idx = self._require_index()
        return {"words": idx.num_words, "signatures": len(idx)}

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> DictionaryIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        return self.index
