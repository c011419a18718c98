from __future__ import annotations
import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

from . import config as CFG
from .combinations import combinations
from .models import Occurrences, Sentence, Word
from .occurrences import sentence_occurrences, subtract, total_letters
from .DB.index import DictionaryIndex

log = logging.getLogger(__name__)


def _branches(index: DictionaryIndex, remaining: Occurrences) -> List[Tuple[Word, Occurrences]]:
    """
    One (word, rest) pair per dictionary word matching a non-empty
    sub-multiset of `remaining`. The empty combination is skipped: it would
    re-enter the same state forever.
    """
    out: List[Tuple[Word, Occurrences]] = []
    for combo in combinations(remaining):
        if not combo:
            continue
        words = index.lookup(combo)
        if not words:
            continue
        rest = subtract(remaining, combo)
        out.extend((w, rest) for w in words)
    return out

def _search(index: DictionaryIndex, prefix: Sentence, remaining: Occurrences) -> List[Sentence]:
    # depth is bounded by the letter count: every step consumes >= 1 letter
    if not remaining:
        return [prefix]
    found: List[Sentence] = []
    for word, rest in _branches(index, remaining):
        found.extend(_search(index, prefix + (word,), rest))
    return found

# set once per worker process by _init_worker
_worker_index: Optional[DictionaryIndex] = None

def _init_worker(index: DictionaryIndex) -> None:
    global _worker_index
    _worker_index = index

def _search_task(args: Tuple[Sentence, Occurrences]) -> List[Sentence]:
    assert _worker_index is not None
    return _search(_worker_index, *args)

def sentence_anagrams(
    index: DictionaryIndex,
    sentence: Iterable[Word],
    *,
    workers: Optional[int] = None,
    mode: Optional[str] = None,
) -> List[Sentence]:
    """
    Every sequence of dictionary words whose letters, taken together, are
    exactly the letters of `sentence` (case-insensitive). Word order is
    significant, so ("my", "sane") and ("sane", "my") are both returned.

    The empty sentence has exactly one anagram, the empty sentence.

    With workers > 1 the top-level branches are searched concurrently
    (mode "threads" or "procs"); the result set is the same, only the order
    of the returned list may differ from a sequential run.
    """
    words = tuple(sentence)
    if not words:
        return [()]

    target = sentence_occurrences(words)
    workers = CFG.SEARCH_WORKERS if workers is None else int(workers)
    if workers <= 1 or not target:
        return _search(index, (), target)

    mode = (mode or CFG.PARALLEL_MODE).lower()
    if mode not in ("threads", "procs"):
        raise ValueError(f"unknown parallel mode: {mode!r}")

    tasks = [((w,), rest) for w, rest in _branches(index, target)]
    log.info("Searching %d top-level branches (%d letters) on %d %s",
             len(tasks), total_letters(target), workers, mode)
    if not tasks:
        return []

    found: List[Sentence] = []
    if mode == "threads":
        with ThreadPoolExecutor(max_workers=workers) as ex:
            for part in ex.map(lambda t: _search(index, *t), tasks):
                found.extend(part)
        return found

    # the index travels once per worker process, tasks carry only (prefix, rest)
    chunksize = max(1, len(tasks) // (workers * 8) or 1)
    with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                             initargs=(index,)) as ex:
        for part in ex.map(_search_task, tasks, chunksize=chunksize):
            found.extend(part)
    return found

def word_anagrams(index: DictionaryIndex, word: Word) -> List[Word]:
    return list(index.word_anagrams(word))
