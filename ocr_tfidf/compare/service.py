# ocr_tfidf/compare/service.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union
import csv
import time

from ocr_tfidf import logging
from ocr_tfidf.compare.model import ComparisonItem, ItemResult
from ocr_tfidf.compare.reporter import Reporter, NoOpReporter
from ocr_tfidf.errors import OCREngineUnavailableError
from ocr_tfidf.files import read_text_file
from ocr_tfidf.metrics.model import DocumentPair
from ocr_tfidf.ocr.service import OCRService

logger = logging.get_logger(__name__)

REPORT_FIELDS = ["name", "score", "wer", "cer", "seconds", "error"]


class CompareUseCase:
    """
    OCRs each image, saves the text, and scores it against the reference translation.
    Items are independent: a failure on one is recorded and the run moves on.
    """

    def __init__(self, ocr_service: OCRService, reporter: Optional[Reporter] = None):
        self.ocr_service = ocr_service
        self.reporter: Reporter = reporter or NoOpReporter()

    # -------------------------------------------------------------------------
    # Single item
    # -------------------------------------------------------------------------
    def compare_item(self, item: ComparisonItem) -> ItemResult:
        t0 = time.perf_counter()

        ocr = self.ocr_service.extract_text_and_save(item.image_path, item.result_path)
        if not ocr.ok:
            return ItemResult(name=item.name, error=ocr.error, seconds=time.perf_counter() - t0)

        reference = read_text_file(item.reference_path)
        if not reference.ok:
            return ItemResult(name=item.name, error=reference.error, seconds=time.perf_counter() - t0)

        pair = DocumentPair(reference=reference.text, candidate=ocr.text)
        return ItemResult(
            name=item.name,
            score=pair.compute_tfidf(),
            wer=pair.compute_wer(),
            cer=pair.compute_cer(),
            seconds=time.perf_counter() - t0,
        )

    # -------------------------------------------------------------------------
    # Whole run
    # -------------------------------------------------------------------------
    def run(self, items: List[ComparisonItem], report_path: Optional[Union[str, Path]] = None) -> List[ItemResult]:
        self.reporter.on_start(items)

        try:
            self.ocr_service.check_available()
        except OCREngineUnavailableError as e:
            self.reporter.on_engine_unavailable(str(e))
            results = [ItemResult(name=item.name, error=f"OCR engine unavailable: {e}") for item in items]
        else:
            results = []
            for item in items:
                self.reporter.on_item_start(item)
                result = self.compare_item(item)
                if result.ok:
                    self.reporter.on_item_result(result)
                else:
                    self.reporter.on_item_failed(result)
                results.append(result)

        if report_path is not None:
            write_report(report_path, results)

        self.reporter.on_finish(results)
        return results


def write_report(report_path: Union[str, Path], results: List[ItemResult]) -> Path:
    """One CSV row per item; failed items keep empty metric cells."""
    path = Path(report_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow({
                "name": r.name,
                "score": "" if r.score is None else f"{r.score:.2f}",
                "wer": "" if r.wer is None else round(r.wer, 6),
                "cer": "" if r.cer is None else round(r.cer, 6),
                "seconds": round(r.seconds, 6),
                "error": r.error or "",
            })
    logger.info(f"Report written to {path}")
    return path
