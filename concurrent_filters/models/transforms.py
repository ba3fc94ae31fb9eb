"""
Per-pixel transforms.

Every transform is a pure function of (input raster, x, y): it reads only
from the input grid and never from output that other workers may be writing.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from . import color_codec
from .errors import ArgumentError
from .pixel_range import PixelRange
from .raster import Raster

MAX_SAMPLE = 255
HISTOGRAM_SLOTS = MAX_SAMPLE + 1


class Transform:
    """
    Base class. Subclasses implement `apply_pixel`; `apply_range` walks a
    PixelRange in scan order and may be overridden with a vectorised version
    as long as it produces the same cells.
    """
    name = "transform"

    def apply_pixel(self, source: Raster, x: int, y: int) -> int:
        raise NotImplementedError

    def apply_range(self, source: Raster, target: Raster, pixel_range: PixelRange) -> int:
        """Write every cell of `pixel_range` into `target`. Returns cells written."""
        written = 0
        for x, y in pixel_range.coordinates():
            target.pixels[y, x] = self.apply_pixel(source, x, y)
            written += 1
        return written


def invert(r: int, g: int, b: int) -> Tuple[int, int, int]:
    return MAX_SAMPLE - r, MAX_SAMPLE - g, MAX_SAMPLE - b


@dataclass(frozen=True)
class Invert(Transform):
    """Channel inversion: (r, g, b) → (255-r, 255-g, 255-b)."""
    name = "invert"

    def apply_pixel(self, source: Raster, x: int, y: int) -> int:
        return color_codec.pack(*invert(*color_codec.unpack(source.pixels[y, x])))

    def apply_range(self, source: Raster, target: Raster, pixel_range: PixelRange) -> int:
        # 255 - c on every channel is the same as flipping all 24 bits.
        written = 0
        for y, x_first, x_last in pixel_range.row_spans():
            row = source.pixels[y, x_first:x_last + 1]
            target.pixels[y, x_first:x_last + 1] = row ^ np.uint32(color_codec.PIXEL_MASK)
            written += x_last - x_first + 1
        return written


def channel_mode(samples: np.ndarray) -> int:
    """
    Most frequent value of uint8 samples; the smallest value wins ties.

    A fixed 256-slot histogram scanned in ascending order keeps the
    tie-break independent of iteration order.
    """
    counts = np.bincount(samples.ravel(), minlength=HISTOGRAM_SLOTS)
    return int(np.argmax(counts))


@dataclass(frozen=True)
class OilEffect(Transform):
    """
    Oil-painting filter: each channel becomes the mode of that channel over
    the (2*radius+1)^2 window around the pixel, clipped to the image.
    """
    radius: int = 0
    name = "oil"

    def __post_init__(self):
        if isinstance(self.radius, bool) or not isinstance(self.radius, (int, np.integer)):
            raise ArgumentError(f"Oil radius must be an integer, got {self.radius!r}")
        if self.radius < 0:
            raise ArgumentError(f"Oil radius must be >= 0, got {self.radius}")

    def window(self, source: Raster, x: int, y: int) -> Tuple[slice, slice]:
        """Row and column slices of the clipped window around (x, y)."""
        rows = slice(max(0, y - self.radius), min(source.height, y + self.radius + 1))
        cols = slice(max(0, x - self.radius), min(source.width, x + self.radius + 1))
        return rows, cols

    def apply_pixel(self, source: Raster, x: int, y: int) -> int:
        rows, cols = self.window(source, x, y)
        planes = color_codec.channel_planes(source.pixels[rows, cols])
        return color_codec.pack(*(channel_mode(plane) for plane in planes))

    def apply_range(self, source: Raster, target: Raster, pixel_range: PixelRange) -> int:
        if pixel_range.is_empty:
            return 0
        if self.radius == 0:
            for y, x_first, x_last in pixel_range.row_spans():
                target.pixels[y, x_first:x_last + 1] = source.pixels[y, x_first:x_last + 1]
            return pixel_range.size

        # Unpack only the band of rows the range's windows can reach.
        band_top = max(0, pixel_range.start_y - self.radius)
        band_bottom = min(source.height, pixel_range.end_y + self.radius + 1)
        planes = color_codec.channel_planes(source.pixels[band_top:band_bottom])

        written = 0
        for x, y in pixel_range.coordinates():
            rows, cols = self.window(source, x, y)
            rows = slice(rows.start - band_top, rows.stop - band_top)
            target.pixels[y, x] = color_codec.pack(
                *(channel_mode(plane[rows, cols]) for plane in planes)
            )
            written += 1
        return written
