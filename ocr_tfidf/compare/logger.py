# ocr_tfidf/compare/logger.py
from __future__ import annotations
from typing import List

from ocr_tfidf import logging
from ocr_tfidf.compare.model import ComparisonItem, ItemResult
from ocr_tfidf.compare.reporter import Reporter

_log = logging.get_logger("CompareUseCase")


class SimpleLoggerReporter(Reporter):
    def on_start(self, items: List[ComparisonItem]) -> None:
        _log.info(f"Comparing {len(items)} image/reference pair(s).")

    def on_engine_unavailable(self, error: str) -> None:
        _log.error(f"OCR engine unavailable, nothing will be scored: {error}")

    def on_item_start(self, item: ComparisonItem) -> None:
        _log.info(f"Processing {item.image_path.name} against {item.reference_path.name}...")

    def on_item_result(self, result: ItemResult) -> None:
        _log.info(
            f"[{result.name}] TF-IDF={result.score:.2f} "
            f"WER={result.wer:.4f} CER={result.cer:.4f} time={result.seconds:.2f}s"
        )

    def on_item_failed(self, result: ItemResult) -> None:
        _log.error(f"[{result.name}] skipped: {result.error}")

    def on_finish(self, results: List[ItemResult]) -> None:
        failed = sum(1 for r in results if not r.ok)
        _log.info(f"Comparison finished: {len(results) - failed} scored, {failed} failed.")
