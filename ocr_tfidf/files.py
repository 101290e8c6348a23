# ocr_tfidf/files.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ocr_tfidf import logging

logger = logging.get_logger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class TextResult:
    """
    Outcome of producing a text at the I/O boundary (file read or OCR).
    Exactly one of text / error is set.
    """
    text: Optional[str] = None
    error: Optional[str] = None
    source: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str, source: PathLike = "") -> "TextResult":
        return cls(text=text, source=str(source))

    @classmethod
    def failure(cls, error: str, source: PathLike = "") -> "TextResult":
        return cls(error=error, source=str(source))


def read_text_file(path: PathLike) -> TextResult:
    """
    Read a UTF-8 text file (a leading BOM is dropped).
    Missing, unreadable or undecodable files give a failed result.
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            return TextResult.success(f.read(), source=path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read text file {path}: {e}")
        return TextResult.failure(f"cannot read {path}: {e}", source=path)


def write_text_file(path: PathLike, text: str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    return target
