# tfidf.py
# ------------------------------------------------------------
# TF-IDF term-overlap score between two texts
# - corpus is exactly the two texts being compared
# - tf = raw counts, idf = ln(2 / df)
# - score = sum over vocabulary of (tf1 + tf2) * idf, rounded to 2 dp
# Terms shared by both texts weigh 0, so identical texts score 0.0 and
# the score grows with the number of terms found in only one text.
# ------------------------------------------------------------
from __future__ import annotations
import math
from collections import Counter
from typing import Dict, Iterable, List, Sequence, Set

from ocr_tfidf.metrics.stemming import tokenize


class TermFrequency:
    """
    Occurrence counts of each token within one document.
    count() returns 0 for a term the document does not contain.
    """

    def __init__(self, tokens: Iterable[str]):
        self._counts = Counter(tokens)

    def count(self, term: str) -> int:
        return self._counts.get(term, 0)

    def __contains__(self, term: object) -> bool:
        return term in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)


def build_vocabulary(*documents: Sequence[str]) -> Set[str]:
    vocabulary: Set[str] = set()
    for document in documents:
        vocabulary.update(document)
    return vocabulary


def compute_document_frequency(documents: Sequence[Sequence[str]], vocabulary: Iterable[str]) -> Dict[str, int]:
    # Membership, not counts: a term counts once per document.
    members = [set(document) for document in documents]
    return {term: sum(1 for doc in members if term in doc) for term in vocabulary}


def compute_idf(documents: Sequence[Sequence[str]], vocabulary: Iterable[str]) -> Dict[str, float]:
    """
    idf(t) = ln(N / df(t)) with N = len(documents).
    Every vocabulary term must occur in at least one document.
    """
    total = len(documents)
    df = compute_document_frequency(documents, vocabulary)
    return {term: math.log(total / count) for term, count in df.items()}


def aggregate_score(tf1: TermFrequency, tf2: TermFrequency, idf: Dict[str, float]) -> float:
    return sum((tf1.count(term) + tf2.count(term)) * weight for term, weight in idf.items())


def round_score(value: float) -> float:
    """
    Round to 2 decimals, ties going up: floor(value * 100 + 0.5) / 100.
    The tie test runs on the binary product, so 1.005 -> 1.0 (1.005 * 100 is
    100.49999999999999) while 0.125 -> 0.13 (12.5 is exact).
    """
    return math.floor(value * 100.0 + 0.5) / 100.0


def score_tokens(words1: List[str], words2: List[str]) -> float:
    vocabulary = build_vocabulary(words1, words2)
    idf = compute_idf([words1, words2], vocabulary)
    raw = aggregate_score(TermFrequency(words1), TermFrequency(words2), idf)
    return round_score(raw)


def compute_tfidf(text1: str, text2: str) -> float:
    """
    TF-IDF score between two raw texts (e.g. a reference translation and OCR output).
    Pure and total: any two strings give a non-negative score, "" vs "" gives 0.0.
    """
    return score_tokens(tokenize(text1), tokenize(text2))
