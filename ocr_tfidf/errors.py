class OcrTfidfError(Exception):
    """Base class for errors raised by ocr_tfidf adapters."""


class OCRError(OcrTfidfError):
    """The OCR engine could not produce text for an image."""


class OCREngineUnavailableError(OCRError):
    """The OCR engine binary or its language data is missing."""
