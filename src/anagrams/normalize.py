from __future__ import annotations
import re

from .models import Sentence

# runs of letters; digits, punctuation and spaces separate words
_LETTERS_RE = re.compile(r"[^\W\d_]+")

def fold(text: str) -> str:
    """
    Lowercase char by char. A char whose lowercase is not a single char
    ("İ" -> "i" + U+0307) is kept as is, so len(fold(w)) == len(w).
    """
    out = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)

def is_word(token: str) -> bool:
    """A dictionary word is a non-empty run of alphabetic characters."""
    return bool(token) and token.isalpha()

def split_sentence(text: str) -> Sentence:
    """Split free text into a Sentence: 'Yes, man!' -> ('Yes', 'man')."""
    return tuple(_LETTERS_RE.findall(text))
