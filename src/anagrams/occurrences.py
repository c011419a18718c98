"""
Letter-frequency signatures ("occurrences") and their arithmetic.

An Occurrences value is a tuple of (char, count) pairs sorted by char, each
char at most once and every count positive:

    word_occurrences("Eat") == (("a", 1), ("e", 1), ("t", 1))

Two texts are anagrams of each other iff their signatures are equal, so a
signature can be used directly as a dict key.
"""
from __future__ import annotations
from collections import Counter
from typing import Iterable

from .models import Occurrences, Word, EMPTY
from .normalize import fold


class InvalidSubtraction(ValueError):
    """Raised by subtract() when y is not a sub-multiset of x."""

    def __init__(self, char: str, have: int, take: int) -> None:
        super().__init__(f"cannot subtract {take} x {char!r} from {have} x {char!r}")
        self.char = char
        self.have = have
        self.take = take


def _canonical(counts: Counter) -> Occurrences:
    return tuple(sorted((c, n) for c, n in counts.items() if n > 0))

def word_occurrences(word: Word) -> Occurrences:
    if not word:
        return EMPTY
    return _canonical(Counter(fold(word)))

def sentence_occurrences(sentence: Iterable[Word]) -> Occurrences:
    return word_occurrences("".join(sentence))

def subtract(x: Occurrences, y: Occurrences) -> Occurrences:
    """
    Multiset difference x - y.

    Precondition: y is a sub-multiset of x. Any char of y missing from x, or
    present with a smaller count, raises InvalidSubtraction instead of being
    dropped or clipped. Entries that reach zero are omitted from the result.
    """
    if not y:
        return x
    take = dict(y)
    out = []
    for c, n in x:
        left = n - take.pop(c, 0)
        if left < 0:
            raise InvalidSubtraction(c, n, n - left)
        if left > 0:
            out.append((c, left))
    if take:
        c, n = min(take.items())
        raise InvalidSubtraction(c, 0, n)
    return tuple(out)

def combine(x: Occurrences, y: Occurrences) -> Occurrences:
    """Multiset union (sum of counts); the inverse of subtract."""
    counts = Counter(dict(x))
    counts.update(dict(y))
    return _canonical(counts)

def total_letters(occurrences: Occurrences) -> int:
    return sum(n for _, n in occurrences)

def is_occurrences(value) -> bool:
    """True if value is in canonical form: sorted, unique chars, positive counts."""
    try:
        chars = [c for c, _ in value]
        counts = [n for _, n in value]
    except (TypeError, ValueError):
        return False
    return (
        all(isinstance(c, str) and len(c) == 1 for c in chars)
        and all(isinstance(n, int) and n > 0 for n in counts)
        and all(a < b for a, b in zip(chars, chars[1:]))
    )
