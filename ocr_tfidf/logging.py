# ocr_tfidf/logging.py
from __future__ import annotations
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for CLI runs.
    Library modules only ever call get_logger().
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger().setLevel(numeric)
