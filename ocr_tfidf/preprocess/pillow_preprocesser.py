# ocr_tfidf/preprocess/pillow_preprocesser.py
import io
from typing import Optional

import cv2
import numpy as np
from PIL import Image, ImageEnhance

from ocr_tfidf.logging import get_logger

logger = get_logger("PillowImagePreprocessor")

MAX_PIXELS = 150_000_000


class PillowImagePreprocessor:
    """
    Concrete implementation of ImagePreprocessorPort using PIL + OpenCV.
    Single-image API: bytes → bytes (PNG).
    """

    def __init__(
        self,
        *,
        grayscale: bool = False,
        contrast: float = 1.0,
        upscale_factor: Optional[float] = None,
        binarize: bool = False,
    ):
        self.grayscale = grayscale or binarize
        self.contrast = contrast
        self.upscale_factor = upscale_factor
        self.binarize = binarize

    def _enhance_contrast(self, pil_image: Image.Image) -> Image.Image:
        if self.contrast != 1.0:
            return ImageEnhance.Contrast(pil_image).enhance(self.contrast)
        return pil_image

    def _upscale(self, image: np.ndarray) -> np.ndarray:
        if not self.upscale_factor or self.upscale_factor == 1.0:
            return image
        orig_h, orig_w = image.shape[:2]
        new_w = max(1, int(orig_w * self.upscale_factor))
        new_h = max(1, int(orig_h * self.upscale_factor))
        if new_w * new_h > MAX_PIXELS:
            logger.warning(f"Skipping upscale: target [{new_w}x{new_h}] exceeds {MAX_PIXELS} pixels")
            return image
        interpolation = cv2.INTER_CUBIC if self.upscale_factor > 1.0 else cv2.INTER_AREA
        return cv2.resize(image, (new_w, new_h), interpolation=interpolation)

    def _binarize(self, image: np.ndarray) -> np.ndarray:
        _, thresh = cv2.threshold(image, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
        return thresh

    def preprocess(self, image_bytes: bytes) -> bytes:
        """
        Input: raw image bytes
        Output: preprocessed PNG bytes
        """
        pil_img = Image.open(io.BytesIO(image_bytes))
        pil_img = pil_img.convert("L" if self.grayscale else "RGB")
        pil_img = self._enhance_contrast(pil_img)

        img = np.array(pil_img)
        img = self._upscale(img)
        if self.binarize:
            img = self._binarize(img)

        buf = io.BytesIO()
        Image.fromarray(img).save(buf, "PNG", compress_level=1, dpi=(300, 300))
        return buf.getvalue()
