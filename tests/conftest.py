from pathlib import Path
from typing import Dict, Optional

import pytest

from ocr_tfidf.compare.model import ComparisonItem
from ocr_tfidf.errors import OCRError, OCREngineUnavailableError


class FakeEngine:
    """In-memory OCR engine: image bytes are looked up as text keys."""

    def __init__(self, texts: Optional[Dict[str, str]] = None, available: bool = True):
        self.texts = texts or {}
        self.available = available
        self.calls = []

    def check_available(self) -> None:
        if not self.available:
            raise OCREngineUnavailableError("tesseract binary not found")

    def recognize(self, image_bytes: bytes) -> str:
        self.calls.append(image_bytes)
        key = image_bytes.decode("utf-8")
        if key not in self.texts:
            raise OCRError(f"unreadable image {key!r}")
        return self.texts[key]


@pytest.fixture
def fake_engine():
    return FakeEngine(texts={
        "img-cat": "The cat sat",
        "img-same": "A quick brown fox",
    })


@pytest.fixture
def items_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "OCR_Items"
    folder.mkdir()
    (folder / "cat.png").write_bytes(b"img-cat")
    (folder / "cat.txt").write_text("the dog sat", encoding="utf-8")
    (folder / "same.png").write_bytes(b"img-same")
    (folder / "same.txt").write_text("a quick brown fox", encoding="utf-8")
    (folder / "broken.png").write_bytes(b"img-broken")
    (folder / "broken.txt").write_text("never compared", encoding="utf-8")
    return folder


def make_item(items_dir: Path, result_dir: Path, stem: str, reference: Optional[str] = None) -> ComparisonItem:
    return ComparisonItem(
        name=stem,
        image_path=items_dir / f"{stem}.png",
        reference_path=items_dir / (reference or f"{stem}.txt"),
        result_path=result_dir / f"result_{stem}.txt",
    )
