# stemming.py
import re
from typing import List

from nltk.stem import PorterStemmer

from ocr_tfidf.metrics.normalization import preprocess

# The stemmer keeps no per-call state in this mode, so one instance is shared.
_stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)
_whitespace = re.compile(r"[ \t\n\x0b\f\r]+")


def stem(token: str) -> str:
    """Reduce one lowercase token to its Porter stem."""
    return _stemmer.stem(token, to_lowercase=False)


def split_tokens(normalized: str) -> List[str]:
    """
    Split an already-normalized string on runs of whitespace, stemming every token.
    Order and duplicates are kept; they are needed for term counts.
    """
    return [stem(token) for token in _whitespace.split(normalized) if token]


def tokenize(text: str) -> List[str]:
    """Raw text -> ordered list of stemmed tokens."""
    return split_tokens(preprocess(text))
