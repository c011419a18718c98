import pickle

from anagrams.DB.index import DictionaryIndex, build_dictionary_index
from anagrams.models import Dictionary
from anagrams.occurrences import word_occurrences


def test_word_anagrams_eat():
    idx = build_dictionary_index(["eat", "tea", "ate"])
    assert set(idx.word_anagrams("eat")) == {"eat", "tea", "ate"}

def test_word_anagrams_include_words_not_in_dictionary_query():
    idx = DictionaryIndex.build(["married", "admirer"])
    assert set(idx.word_anagrams("Admirer")) == {"married", "admirer"}

def test_lookup_unknown_signature_is_empty_not_error():
    idx = build_dictionary_index(["eat"])
    assert idx.lookup(word_occurrences("xyz")) == ()
    assert idx.word_anagrams("player") == ()
    assert idx.lookup(()) == ()

def test_groups_by_signature_and_counts():
    idx = DictionaryIndex.build(Dictionary(words=("eat", "tea", "Sean", "sane", "my")))
    assert len(idx) == 3
    assert idx.num_words == 5
    assert word_occurrences("aens") in idx
    assert set(idx.signatures()) == {
        word_occurrences("eat"), word_occurrences("sane"), word_occurrences("my"),
    }

def test_case_preserved_in_results():
    idx = DictionaryIndex.build(["Sean", "sane"])
    assert set(idx.word_anagrams("NEAS")) == {"Sean", "sane"}

def test_empty_dictionary():
    idx = DictionaryIndex.build([])
    assert len(idx) == 0 and idx.num_words == 0
    assert idx.word_anagrams("cat") == ()

def test_index_survives_pickle():
    idx = DictionaryIndex.build(["eat", "tea"])
    again = pickle.loads(pickle.dumps(idx))
    assert set(again.word_anagrams("ate")) == {"eat", "tea"}
    assert again.num_words == 2
