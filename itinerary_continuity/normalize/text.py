"""Text normalization shared by location matching and duration inference."""

import re
import unicodedata
from typing import List

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")
_TOKEN_SPLIT = re.compile(r"[\s,]+")


def strip_diacritics(text: str) -> str:
    """'Málaga' -> 'Malaga'."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_name(name: str) -> str:
    """Lower-case, strip diacritics and punctuation, collapse whitespace."""
    if not name:
        return ""
    cleaned = strip_diacritics(name).lower()
    cleaned = _PUNCTUATION.sub("", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


def tokenize(normalized: str) -> List[str]:
    return [t for t in _TOKEN_SPLIT.split(normalized) if t]
