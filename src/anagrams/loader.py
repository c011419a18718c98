from __future__ import annotations
import logging
import os
from typing import Dict, Iterable, Iterator, List

from . import config as CFG
from .models import Dictionary, Word
from .normalize import is_word

log = logging.getLogger(__name__)

# Progress logging: set ANAGRAMS_VERBOSE=1 to enable
PROGRESS_EVERY_FILES = 100

def _iter_dictionary_files(paths: Iterable[str]) -> Iterator[str]:
    """
    Yield dictionary files: a file path is taken as-is, a directory is walked
    recursively for files with a suffix in DICTIONARY_EXTS (sorted, so the
    first-occurrence-wins dedup is deterministic).
    """
    exts = tuple(e.lower() for e in CFG.DICTIONARY_EXTS)
    for p in paths:
        p = os.path.abspath(p)
        if os.path.isfile(p):
            yield p
        elif os.path.isdir(p):
            for dirpath, dirnames, filenames in os.walk(p):
                dirnames.sort()
                for fn in sorted(filenames):
                    if fn.lower().endswith(exts):
                        yield os.path.join(dirpath, fn)
        else:
            raise FileNotFoundError(p)

def _read_words(path: str) -> Iterator[Word]:
    skipped = 0
    with open(path, "r", encoding=CFG.ENCODING, errors="ignore") as f:
        for raw in f:
            line = raw.strip()
            if not line or line.startswith(CFG.COMMENT_PREFIX):
                continue
            if not is_word(line):
                skipped += 1
                continue
            yield line
    if skipped:
        log.warning("%s: skipped %d non-alphabetic entries", path, skipped)

def load_dictionary(paths: Iterable[str]) -> Dictionary:
    """
    Read one word per line from every dictionary file under `paths`.
    Case is kept as written ("Sean" stays "Sean"); exact duplicates are
    dropped, first occurrence wins.
    """
    verbose = os.environ.get("ANAGRAMS_VERBOSE") == "1"
    seen: Dict[Word, None] = {}
    sources: List[str] = []
    for path in _iter_dictionary_files(paths):
        for w in _read_words(path):
            seen.setdefault(w, None)
        sources.append(path)
        if verbose and len(sources) % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d words=%d", len(sources), len(seen))

    log.info("Loaded %d words from %d file(s)", len(seen), len(sources))
    return Dictionary(words=tuple(seen), sources=tuple(sources))
