from __future__ import annotations
import os
import pickle

from .index import DictionaryIndex

def save_index(index: DictionaryIndex, path: str) -> None:
    """
    Cache a built DictionaryIndex so later runs can skip reading the word
    lists. The pickle goes to `<path>.tmp` and is renamed over `path`.
    """
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "wb") as f:
        pickle.dump(index, f, protocol=pickle.HIGHEST_PROTOCOL)
    os.replace(tmp, path)

def load_index(path: str) -> DictionaryIndex:
    """Read an index written by save_index(); anything else is a TypeError."""
    with open(path, "rb") as f:
        idx = pickle.load(f)
    if not isinstance(idx, DictionaryIndex):
        raise TypeError(f"{path} does not contain a DictionaryIndex (got {type(idx).__name__})")
    return idx
