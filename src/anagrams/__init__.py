"""Sentence anagrams over a fixed word dictionary."""
from .models import Dictionary, Occurrences, Sentence, Word
from .occurrences import (
    InvalidSubtraction,
    combine,
    sentence_occurrences,
    subtract,
    word_occurrences,
)
from .combinations import combinations
from .DB.index import DictionaryIndex, build_dictionary_index
from .search import sentence_anagrams, word_anagrams
from .loader import load_dictionary
from .engine import Engine

__all__ = [
    "Dictionary", "Occurrences", "Sentence", "Word",
    "InvalidSubtraction", "combine", "sentence_occurrences", "subtract", "word_occurrences",
    "combinations",
    "DictionaryIndex", "build_dictionary_index",
    "sentence_anagrams", "word_anagrams",
    "load_dictionary",
    "Engine",
]
