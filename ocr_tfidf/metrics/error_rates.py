# error_rates.py
from typing import Optional
import jiwer

from ocr_tfidf.metrics.normalization import transform_word, transform_character


def _token_count(transform: jiwer.Compose, text: str) -> int:
    return sum(len(seq) for seq in transform(text))


def _guarded(
    metric,
    ground_truth: str,
    prediction: str,
    reference_transform: jiwer.Compose,
    hypothesis_transform: jiwer.Compose,
) -> float:
    """
    Guard rails around jiwer, which rejects empty references:
    - empty reference: 0.0 if the prediction is empty too, otherwise 1.0
    - empty prediction against a non-empty reference: 1.0 (everything deleted)
    """
    ref_tokens = _token_count(reference_transform, ground_truth)
    hyp_tokens = _token_count(hypothesis_transform, prediction)

    if ref_tokens == 0:
        return 0.0 if hyp_tokens == 0 else 1.0
    if hyp_tokens == 0:
        return 1.0

    return float(metric(
        ground_truth,
        prediction,
        reference_transform=reference_transform,
        hypothesis_transform=hypothesis_transform,
    ))


def compute_wer(
    ground_truth: str,
    prediction: str,
    reference_transform: Optional[jiwer.Compose] = None,
    hypothesis_transform: Optional[jiwer.Compose] = None,
) -> float:
    """Compute Word Error Rate (WER)."""
    return _guarded(
        jiwer.wer,
        ground_truth,
        prediction,
        reference_transform or transform_word,
        hypothesis_transform or transform_word,
    )


def compute_cer(
    ground_truth: str,
    prediction: str,
    reference_transform: Optional[jiwer.Compose] = None,
    hypothesis_transform: Optional[jiwer.Compose] = None,
) -> float:
    """Compute Character Error Rate (CER). Whitespace differences are ignored."""
    return _guarded(
        jiwer.cer,
        ground_truth,
        prediction,
        reference_transform or transform_character,
        hypothesis_transform or transform_character,
    )
