"""
Tests for the comparison run: per-item isolation, engine availability,
result saving and the CSV report.
"""
import csv
import logging

import pytest

from ocr_tfidf.compare.logger import SimpleLoggerReporter
from ocr_tfidf.compare.model import ItemResult, RunConfig, default_items
from ocr_tfidf.compare.service import CompareUseCase, write_report
from ocr_tfidf.ocr.service import OCRService
from tests.conftest import make_item


class RecordingReporter:
    def __init__(self):
        self.events = []

    def on_start(self, items): self.events.append(("start", len(items)))
    def on_engine_unavailable(self, error): self.events.append(("unavailable", error))
    def on_item_start(self, item): self.events.append(("item", item.name))
    def on_item_result(self, result): self.events.append(("ok", result.name))
    def on_item_failed(self, result): self.events.append(("failed", result.name))
    def on_finish(self, results): self.events.append(("finish", len(results)))


@pytest.fixture
def use_case(fake_engine):
    return CompareUseCase(OCRService(fake_engine), reporter=RecordingReporter())


class TestCompareItem:
    def test_scores_ocr_text_against_reference(self, use_case, items_dir, tmp_path):
        item = make_item(items_dir, tmp_path / "results", "cat")

        result = use_case.compare_item(item)

        assert result.ok
        assert result.score == 1.39
        assert result.wer == pytest.approx(1 / 3)
        assert result.cer == pytest.approx(3 / 9)
        assert result.seconds >= 0.0
        assert item.result_path.read_text(encoding="utf-8") == "The cat sat"

    def test_perfect_ocr_scores_zero(self, use_case, items_dir, tmp_path):
        result = use_case.compare_item(make_item(items_dir, tmp_path / "results", "same"))
        assert result.score == 0.0
        assert result.wer == 0.0

    def test_ocr_failure_short_circuits(self, use_case, items_dir, tmp_path):
        item = make_item(items_dir, tmp_path / "results", "broken")

        result = use_case.compare_item(item)

        assert not result.ok
        assert result.score is None and result.wer is None and result.cer is None
        assert "OCR failed" in result.error
        assert not item.result_path.exists()

    def test_missing_reference_is_not_scored_as_empty_text(self, use_case, items_dir, tmp_path):
        item = make_item(items_dir, tmp_path / "results", "cat", reference="cat_missing.txt")

        result = use_case.compare_item(item)

        assert not result.ok
        assert result.score is None
        assert "cat_missing.txt" in result.error
        # OCR ran and was saved before the reference was read
        assert item.result_path.exists()


class TestRun:
    def test_failures_do_not_stop_the_run(self, use_case, items_dir, tmp_path):
        results_dir = tmp_path / "results"
        items = [
            make_item(items_dir, results_dir, "broken"),
            make_item(items_dir, results_dir, "cat"),
            make_item(items_dir, results_dir, "same", reference="absent.txt"),
        ]

        results = use_case.run(items)

        assert [r.name for r in results] == ["broken", "cat", "same"]
        assert [r.ok for r in results] == [False, True, False]
        assert results[1].score == 1.39
        assert use_case.reporter.events == [
            ("start", 3),
            ("item", "broken"), ("failed", "broken"),
            ("item", "cat"), ("ok", "cat"),
            ("item", "same"), ("failed", "same"),
            ("finish", 3),
        ]

    def test_unavailable_engine_scores_nothing(self, fake_engine, items_dir, tmp_path):
        fake_engine.available = False
        reporter = RecordingReporter()
        use_case = CompareUseCase(OCRService(fake_engine), reporter=reporter)
        items = [make_item(items_dir, tmp_path / "results", "cat")]

        results = use_case.run(items)

        assert len(results) == 1
        assert not results[0].ok
        assert "unavailable" in results[0].error
        assert fake_engine.calls == []
        assert reporter.events[1][0] == "unavailable"
        assert reporter.events[-1] == ("finish", 1)

    def test_empty_item_list(self, use_case):
        assert use_case.run([]) == []

    def test_writes_csv_report(self, use_case, items_dir, tmp_path):
        report = tmp_path / "reports" / "scores.csv"
        items = [make_item(items_dir, tmp_path / "results", s) for s in ("cat", "broken")]

        use_case.run(items, report_path=report)

        with open(report, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [r["name"] for r in rows] == ["cat", "broken"]
        assert rows[0]["score"] == "1.39"
        assert rows[0]["error"] == ""
        assert rows[1]["score"] == ""
        assert rows[1]["error"].startswith("OCR failed")

    def test_default_reporter_is_silent(self, fake_engine, items_dir, tmp_path):
        use_case = CompareUseCase(OCRService(fake_engine))
        assert use_case.run([make_item(items_dir, tmp_path / "r", "cat")])[0].ok


class TestWriteReport:
    def test_header_only_for_no_results(self, tmp_path):
        path = write_report(tmp_path / "empty.csv", [])
        assert path.read_text(encoding="utf-8").strip() == "name,score,wer,cer,seconds,error"


class TestSimpleLoggerReporter:
    def test_logs_scores_and_failures(self, caplog):
        caplog.set_level(logging.INFO)
        reporter = SimpleLoggerReporter()
        ok = ItemResult(name="cat", score=1.39, wer=0.3333, cer=0.3333, seconds=0.5)
        failed = ItemResult(name="broken", error="OCR failed for broken.png")

        reporter.on_item_result(ok)
        reporter.on_item_failed(failed)
        reporter.on_finish([ok, failed])

        assert "[cat] TF-IDF=1.39" in caplog.text
        assert "[broken] skipped: OCR failed for broken.png" in caplog.text
        assert "1 scored, 1 failed" in caplog.text
        assert any(r.levelno == logging.ERROR for r in caplog.records)


class TestModels:
    def test_default_items_are_the_three_fixed_pairs(self, tmp_path):
        items = default_items(tmp_path / "OCR_Items", tmp_path / "out")
        assert [i.image_path.name for i in items] == ["test_OCR_1.jpg", "test_OCR_2.jpg", "test_image.jpeg"]
        assert [i.reference_path.name for i in items] == [
            "test_OCR_trad_1.txt", "test_OCR_trad_2.txt", "test_image.txt",
        ]
        assert all(i.result_path.parent == tmp_path / "out" for i in items)

    def test_run_config_rejects_empty_language_code(self, tmp_path):
        with pytest.raises(ValueError):
            RunConfig(base_dir=tmp_path, items_dir=tmp_path, result_dir=tmp_path, lang="eng+")
