# ocr_tfidf/ocr/tesseract_ocr.py
from __future__ import annotations
from collections import defaultdict
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
import cv2
import pytesseract
from pytesseract import Output

from ocr_tfidf import logging
from ocr_tfidf.errors import OCRError, OCREngineUnavailableError

logger = logging.get_logger(__name__)


class TesseractOCREngine:
    """
    Tesseract-backed OCR engine that implements the OCREngine port.
    - Accepts image bytes
    - Returns a single string with line breaks
    - Internally groups words into lines using (block, paragraph, line) keys
    """

    def __init__(self, lang: str = "eng+fra", tessdata_dir: Optional[Union[str, Path]] = None):
        self.lang = lang
        self.tessdata_dir = Path(tessdata_dir) if tessdata_dir else None
        logger.info(f"TesseractOCREngine initialized with lang={self.lang} tessdata_dir={self.tessdata_dir}")

    @property
    def config(self) -> str:
        if self.tessdata_dir is None:
            return ""
        return f'--tessdata-dir "{self.tessdata_dir}"'

    def check_available(self) -> None:
        try:
            version = pytesseract.get_tesseract_version()
        except pytesseract.TesseractNotFoundError as e:
            raise OCREngineUnavailableError(f"tesseract binary not found: {e}") from e

        if self.tessdata_dir is not None and not self.tessdata_dir.is_dir():
            raise OCREngineUnavailableError(f"tessdata directory does not exist: {self.tessdata_dir}")

        try:
            installed = set(pytesseract.get_languages(config=self.config))
        except pytesseract.TesseractError as e:
            raise OCREngineUnavailableError(f"cannot list tesseract languages: {e}") from e
        missing = [code for code in self.lang.split("+") if code not in installed]
        if missing:
            raise OCREngineUnavailableError(f"missing tesseract language data: {', '.join(missing)}")

        logger.debug(f"tesseract {version} ready")

    def recognize(self, image_bytes: bytes) -> str:
        """
        Run OCR and return text only (line-broken).
        """
        # Decode bytes → OpenCV image (BGR)
        nparr = np.frombuffer(image_bytes, np.uint8)
        image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)
        if image is None:
            raise OCRError("Failed to decode image from bytes")

        try:
            data = pytesseract.image_to_data(image, output_type=Output.DICT, lang=self.lang, config=self.config)
        except pytesseract.TesseractNotFoundError as e:
            raise OCREngineUnavailableError(str(e)) from e
        except (pytesseract.TesseractError, RuntimeError) as e:
            raise OCRError(f"tesseract failed: {e}") from e

        lines = defaultdict(list)
        for i in range(len(data["text"])):
            txt = data["text"][i].strip()
            if not txt:
                continue
            key: Tuple[int, int, int] = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
            lines[key].append(txt)

        # Sort lines by (block, paragraph, line) to ensure deterministic order
        line_texts: List[str] = [" ".join(lines[k]) for k in sorted(lines.keys())]
        return "\n".join(line_texts).strip()
