from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pytest

from concurrent_filters.models import color_codec
from concurrent_filters.models.raster import Raster


def raster_from_rgb(rows: Sequence[Sequence[Tuple[int, int, int]]]) -> Raster:
    rgb = np.array(rows, dtype=np.uint8)
    return Raster(color_codec.pack_array(rgb))


def rgb_rows(raster: Raster):
    return [[color_codec.unpack(p) for p in row] for row in raster.pixels]


@pytest.fixture
def noisy_raster() -> Raster:
    # Few distinct values per channel so the oil filter sees plenty of ties.
    rng = np.random.default_rng(7)
    rgb = rng.integers(0, 4, size=(9, 13, 3), dtype=np.uint8) * 60
    return Raster(color_codec.pack_array(rgb))
