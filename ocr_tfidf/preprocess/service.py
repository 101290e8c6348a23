from __future__ import annotations

import cv2
from PIL import Image, UnidentifiedImageError

from ocr_tfidf.logging import get_logger
from ocr_tfidf.preprocess.model import PreprocessConfig
from ocr_tfidf.preprocess.pillow_preprocesser import PillowImagePreprocessor
from ocr_tfidf.preprocess.ports import ImagePreprocessorPort

logger = get_logger("PreprocessorService")


class PreprocessService:
    """
    Core-level use case for image preprocessing.
    Wraps a specific preprocessor (adapter) implementing ImagePreprocessorPort.
    """

    def __init__(self, config: PreprocessConfig, preprocessor: type[ImagePreprocessorPort] = PillowImagePreprocessor):
        """
        Accepts the preprocessor *class* (adapter type), not instance,
        so it is constructed from the config.
        """
        self.config = config
        self._preprocessor = preprocessor(**config.to_kwargs())

    def run(self, image_bytes: bytes) -> bytes:
        """
        Runs preprocessing on a single image (bytes → bytes).
        On failure the original bytes are returned so OCR can still try them.
        """
        if self.config.is_noop:
            return image_bytes
        try:
            return self._preprocessor.preprocess(image_bytes)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, cv2.error) as e:
            logger.error(f"PreprocessService.run failed: {e}")
            return image_bytes
