# ocr_tfidf/ocr/service.py
from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

from ocr_tfidf import logging
from ocr_tfidf.errors import OCRError
from ocr_tfidf.files import TextResult, write_text_file
from ocr_tfidf.ocr.ports import OCREngine
from ocr_tfidf.preprocess.service import PreprocessService

logger = logging.get_logger(__name__)

PathLike = Union[str, Path]


class OCRService:
    """
    Minimal OCR service: reads an image file and returns recognized text as a TextResult.
    No batching, no thread pools; just delegates to the injected engine.
    """

    def __init__(self, engine: OCREngine, preprocessor: Optional[PreprocessService] = None):
        """
        :param engine: Any implementation of OCREngine (e.g., TesseractOCREngine)
        :param preprocessor: optional image preprocessing applied before OCR
        """
        self.engine = engine
        self.preprocessor = preprocessor

    def check_available(self) -> None:
        self.engine.check_available()

    def recognize(self, image_bytes: bytes) -> str:
        if self.preprocessor is not None:
            image_bytes = self.preprocessor.run(image_bytes)
        return self.engine.recognize(image_bytes)

    def extract_text(self, image_path: PathLike) -> TextResult:
        """
        Do OCR on a single image file.
        Errors are logged and returned as a failed TextResult.
        """
        try:
            with open(image_path, "rb") as f:
                img_bytes = f.read()
        except OSError as e:
            logger.error(f"Cannot read image {image_path}: {e}")
            return TextResult.failure(f"cannot read image {image_path}: {e}", source=image_path)

        try:
            text = self.recognize(img_bytes)
        except OCRError as e:
            logger.error(f"OCR failed for {image_path}: {e}")
            return TextResult.failure(f"OCR failed for {image_path}: {e}", source=image_path)

        return TextResult.success(text, source=image_path)

    def extract_text_and_save(self, image_path: PathLike, result_path: PathLike) -> TextResult:
        """
        OCR an image and write the extracted text to result_path (parent dirs created).
        A failed write fails the whole result.
        """
        result = self.extract_text(image_path)
        if not result.ok:
            return result

        try:
            write_text_file(result_path, result.text)
        except OSError as e:
            logger.error(f"Cannot save OCR text for {image_path} to {result_path}: {e}")
            return TextResult.failure(f"cannot write {result_path}: {e}", source=image_path)

        logger.info(f"The extracted text has been saved to {result_path}")
        return result
