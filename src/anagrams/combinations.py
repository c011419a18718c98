from __future__ import annotations
from itertools import product
from typing import List

from .models import Occurrences


def combinations(occurrences: Occurrences) -> List[Occurrences]:
    """
    All sub-multisets of `occurrences`, including () and `occurrences` itself.

    For pairs (c1, n1) ... (ck, nk) every char independently contributes
    0..ni copies, so there are exactly prod(ni + 1) results:

        combinations((("a", 2), ("b", 1))) ==
            [(), (("b", 1),), (("a", 1),), (("a", 1), ("b", 1)),
             (("a", 2),), (("a", 2), ("b", 1))]

    Runs as a flat Cartesian product over the per-char choices instead of
    recursing once per char. The input is already sorted, so each produced
    combination is canonical without re-sorting.
    """
    choices = [
        [(c, taken) for taken in range(n + 1)]
        for c, n in occurrences
    ]
    return [
        tuple(pair for pair in picked if pair[1] > 0)
        for picked in product(*choices)
    ]
