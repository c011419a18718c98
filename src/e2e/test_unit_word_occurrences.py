import pytest

from anagrams.occurrences import word_occurrences, sentence_occurrences, is_occurrences


def test_word_occurrences_counts_and_sorts():
    assert word_occurrences("robert") == (("b", 1), ("e", 1), ("o", 1), ("r", 2), ("t", 1))

def test_empty_word_has_empty_signature():
    assert word_occurrences("") == ()

def test_case_is_folded():
    assert word_occurrences("Robert") == word_occurrences("rOBERT") == word_occurrences("robert")

@pytest.mark.parametrize("word", ["a", "abba", "Mississippi", "Sean", "zyzzyva"])
def test_counts_sum_to_word_length_and_form_is_canonical(word):
    occ = word_occurrences(word)
    assert sum(n for _, n in occ) == len(word)
    assert is_occurrences(occ)

def test_reordering_letters_keeps_signature():
    assert word_occurrences("listen") == word_occurrences("silent") == word_occurrences("enlist")

def test_sentence_occurrences_ignores_word_order_and_boundaries():
    expected = (("a", 1), ("b", 1), ("c", 1), ("d", 1), ("e", 1))
    assert sentence_occurrences(["abcd", "e"]) == expected
    assert sentence_occurrences(["e", "abcd"]) == expected
    assert sentence_occurrences(["ab", "c", "de"]) == expected

def test_sentence_occurrences_of_empty_sentence():
    assert sentence_occurrences([]) == ()

def test_signature_is_usable_as_dict_key():
    d = {word_occurrences("eat"): "x"}
    assert d[word_occurrences("TEA")] == "x"

@pytest.mark.parametrize("value", [
    (("b", 1), ("a", 1)),       # unsorted
    (("a", 1), ("a", 2)),       # duplicate char
    (("a", 0),),                # zero count
    (("ab", 1),),               # not a single char
])
def test_is_occurrences_rejects_non_canonical(value):
    assert not is_occurrences(value)

def test_dotted_capital_i_counts_as_one_letter():
    occ = word_occurrences("İzmir")
    assert sum(n for _, n in occ) == len("İzmir")
    assert all(c != "\u0307" for c, _ in occ)
    assert is_occurrences(occ)
