from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ocr_tfidf.preprocess.model import PreprocessConfig

DEFAULT_LANG = "eng+fra"


@dataclass(frozen=True)
class ComparisonItem:
    """One image to OCR, its reference translation and where to save the OCR text."""
    name: str
    image_path: Path
    reference_path: Path
    result_path: Path


@dataclass(frozen=True)
class ItemResult:
    name: str
    score: Optional[float] = None
    wer: Optional[float] = None
    cer: Optional[float] = None
    error: Optional[str] = None
    seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RunConfig:
    base_dir: Path
    items_dir: Path
    result_dir: Path
    lang: str = DEFAULT_LANG
    tessdata_dir: Optional[Path] = None
    discover: bool = False
    report_path: Optional[Path] = None
    preprocess: PreprocessConfig = field(default_factory=PreprocessConfig)

    def __post_init__(self) -> None:
        codes = self.lang.split("+")
        if not all(codes):
            raise ValueError(f"invalid tesseract language string: {self.lang!r}")


def default_items(items_dir: Path, result_dir: Path) -> List[ComparisonItem]:
    """The three fixed image/translation pairs the tool was written for."""
    return [
        ComparisonItem(
            name="test_OCR_1",
            image_path=items_dir / "test_OCR_1.jpg",
            reference_path=items_dir / "test_OCR_trad_1.txt",
            result_path=result_dir / "result_test_ocr_1.txt",
        ),
        ComparisonItem(
            name="test_OCR_2",
            image_path=items_dir / "test_OCR_2.jpg",
            reference_path=items_dir / "test_OCR_trad_2.txt",
            result_path=result_dir / "result_test_ocr_2.txt",
        ),
        ComparisonItem(
            name="test_image",
            image_path=items_dir / "test_image.jpeg",
            reference_path=items_dir / "test_image.txt",
            result_path=result_dir / "result_test_image.txt",
        ),
    ]
