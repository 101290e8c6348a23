from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class PreprocessConfig:
    grayscale: bool = False
    contrast: float = 1.0
    upscale_factor: Optional[float] = None
    binarize: bool = False  # Otsu threshold, implies grayscale

    def __post_init__(self) -> None:
        if self.contrast <= 0:
            raise ValueError("contrast must be > 0")
        if self.upscale_factor is not None and self.upscale_factor <= 0:
            raise ValueError("upscale_factor must be > 0 when provided")

    @property
    def is_noop(self) -> bool:
        return (
            not self.grayscale
            and self.contrast == 1.0
            and (self.upscale_factor is None or self.upscale_factor == 1.0)
            and not self.binarize
        )

    def to_kwargs(self) -> Dict[str, Any]:
        return dict(
            grayscale=self.grayscale,
            contrast=self.contrast,
            upscale_factor=self.upscale_factor,
            binarize=self.binarize,
        )
