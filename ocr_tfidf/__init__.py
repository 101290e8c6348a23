"""OCR a handful of images and score them against reference translations."""

__version__ = "0.1.0"
