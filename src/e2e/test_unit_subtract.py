import pytest

from anagrams.combinations import combinations
from anagrams.occurrences import (
    InvalidSubtraction, combine, subtract, total_letters, word_occurrences,
)


def test_subtract_lard_r():
    lard = (("a", 1), ("d", 1), ("l", 1), ("r", 1))
    r = (("r", 1),)
    assert subtract(lard, r) == (("a", 1), ("d", 1), ("l", 1))

def test_subtract_drops_zero_entries_and_keeps_order():
    x = (("a", 2), ("b", 1), ("c", 3))
    assert subtract(x, (("a", 1), ("b", 1))) == (("a", 1), ("c", 3))

def test_subtract_empty_is_identity():
    x = word_occurrences("banana")
    assert subtract(x, ()) == x

@pytest.mark.parametrize("word", ["", "a", "banana", "mississippi"])
def test_subtract_self_is_empty(word):
    x = word_occurrences(word)
    assert subtract(x, x) == ()

@pytest.mark.parametrize("word", ["abba", "banana", "yesman"])
def test_subtract_every_combination_then_combine_restores(word):
    x = word_occurrences(word)
    for c in combinations(x):
        assert combine(subtract(x, c), c) == x

def test_subtract_more_than_available_raises():
    with pytest.raises(InvalidSubtraction) as ei:
        subtract((("a", 1),), (("a", 2),))
    assert ei.value.char == "a"
    assert ei.value.have == 1 and ei.value.take == 2

def test_subtract_unknown_char_raises():
    with pytest.raises(InvalidSubtraction) as ei:
        subtract((("a", 1),), (("z", 1),))
    assert ei.value.char == "z"

def test_invalid_subtraction_is_a_value_error():
    with pytest.raises(ValueError):
        subtract((), (("a", 1),))

def test_total_letters_drops_by_combination_size():
    x = word_occurrences("mississippi")
    c = (("i", 2), ("s", 1))
    assert total_letters(x) == 11
    assert total_letters(subtract(x, c)) == 8
