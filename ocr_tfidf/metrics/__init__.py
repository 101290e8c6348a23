from ocr_tfidf.metrics.error_rates import compute_cer, compute_wer
from ocr_tfidf.metrics.model import DocumentPair
from ocr_tfidf.metrics.normalization import preprocess
from ocr_tfidf.metrics.stemming import stem, tokenize
from ocr_tfidf.metrics.tfidf import TermFrequency, compute_idf, compute_tfidf, round_score

__all__ = [
    "DocumentPair",
    "TermFrequency",
    "compute_cer",
    "compute_idf",
    "compute_tfidf",
    "compute_wer",
    "preprocess",
    "round_score",
    "stem",
    "tokenize",
]
