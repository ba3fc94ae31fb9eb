from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np

from .color_codec import PIXEL_MASK


@dataclass
class Raster:
    """
    Simple data object: packed 0xRRGGBB pixels (+ optional path for bookkeeping).
    No OpenCV / Pillow logic outside the repository layer.
    """
    pixels: np.ndarray # Shape (H, W), dtype uint32, row-major scan order.
    path: Path | None = None # Source (input) or destination (output) of the raster.

    def __post_init__(self):
        if self.pixels.ndim != 2:
            raise ValueError(f"Raster pixels must be 2-D (H, W), got shape {self.pixels.shape}")
        height, width = self.pixels.shape
        if width < 1 or height < 1:
            raise ValueError(f"Raster must be at least 1x1, got {width}x{height}")
        if self.pixels.dtype != np.uint32:
            if self.pixels.size and (self.pixels.min() < 0 or self.pixels.max() > PIXEL_MASK):
                raise ValueError("Raster pixel values must lie in [0, 0xFFFFFF]")
            self.pixels = self.pixels.astype(np.uint32)
        elif self.pixels.max() > PIXEL_MASK:
            raise ValueError("Raster pixel values must lie in [0, 0xFFFFFF]")
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def total_pixels(self) -> int:
        return self.pixels.size
