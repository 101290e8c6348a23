from typing import Protocol


class OCREngine(Protocol):
    """
    OCR Engine interface (port).
    Implementations accept image bytes and return plain text (no bboxes),
    raising OCRError when no text can be produced.
    """
    def recognize(self, image_bytes: bytes) -> str:
        ...

    def check_available(self) -> None:
        """Raise OCREngineUnavailableError when the engine cannot run at all."""
        ...
