# model.py
from dataclasses import dataclass

from ocr_tfidf.metrics.error_rates import compute_wer, compute_cer
from ocr_tfidf.metrics.tfidf import compute_tfidf


@dataclass(frozen=True)
class DocumentPair:
    reference: str
    candidate: str

    def compute_tfidf(self) -> float:
        return compute_tfidf(self.reference, self.candidate)

    def compute_wer(self) -> float:
        return compute_wer(self.reference.strip(), self.candidate.strip())

    def compute_cer(self) -> float:
        return compute_cer(self.reference.strip(), self.candidate.strip())
