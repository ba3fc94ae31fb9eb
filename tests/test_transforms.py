from __future__ import annotations

import numpy as np
import pytest

from concurrent_filters.models import color_codec
from concurrent_filters.models.errors import ArgumentError
from concurrent_filters.models.pixel_range import PixelRange
from concurrent_filters.models.raster import Raster
from concurrent_filters.models.transforms import Invert, OilEffect, channel_mode, invert

from conftest import raster_from_rgb, rgb_rows


def _whole(raster: Raster) -> PixelRange:
    return PixelRange.from_offsets(0, raster.total_pixels, raster.width)


def _apply(transform, raster: Raster) -> Raster:
    out = Raster(np.zeros_like(raster.pixels))
    transform.apply_range(raster, out, _whole(raster))
    return out


def test_invert_is_involutive() -> None:
    for triple in [(0, 0, 0), (255, 255, 255), (1, 128, 254), (17, 0, 99)]:
        assert invert(*invert(*triple)) == triple


def test_invert_two_by_two_scenario() -> None:
    raster = raster_from_rgb([
        [(255, 0, 0), (0, 255, 0)],
        [(0, 0, 255), (255, 255, 255)],
    ])
    out = _apply(Invert(), raster)
    assert rgb_rows(out) == [
        [(0, 255, 255), (255, 0, 255)],
        [(255, 255, 0), (0, 0, 0)],
    ]


def test_invert_range_matches_pixel_function(noisy_raster: Raster) -> None:
    out = _apply(Invert(), noisy_raster)
    for y in range(noisy_raster.height):
        for x in range(noisy_raster.width):
            assert out.pixels[y, x] == Invert().apply_pixel(noisy_raster, x, y)


def test_invert_only_touches_its_range(noisy_raster: Raster) -> None:
    out = Raster(np.zeros_like(noisy_raster.pixels))
    part = PixelRange.from_offsets(5, 20, noisy_raster.width)
    assert Invert().apply_range(noisy_raster, out, part) == 20
    flat = out.pixels.reshape(-1)
    assert not flat[:5].any()
    assert not flat[25:].any()
    assert np.array_equal(flat[5:25], noisy_raster.pixels.reshape(-1)[5:25] ^ 0xFFFFFF)


def test_channel_mode_breaks_ties_with_smallest_value() -> None:
    assert channel_mode(np.array([9, 9, 3, 3, 200], dtype=np.uint8)) == 3
    assert channel_mode(np.array([255, 0], dtype=np.uint8)) == 0
    assert channel_mode(np.array([7, 7, 7, 1, 1], dtype=np.uint8)) == 7


def test_oil_radius_zero_is_identity(noisy_raster: Raster) -> None:
    assert np.array_equal(_apply(OilEffect(0), noisy_raster).pixels, noisy_raster.pixels)
    assert OilEffect(0).apply_pixel(noisy_raster, 4, 4) == noisy_raster.pixels[4, 4]


def test_oil_uniform_raster_keeps_color() -> None:
    color = (12, 200, 77)
    raster = raster_from_rgb([[color] * 3 for _ in range(3)])
    assert color_codec.unpack(OilEffect(1).apply_pixel(raster, 1, 1)) == color
    assert rgb_rows(_apply(OilEffect(1), raster)) == [[color] * 3] * 3


def test_oil_takes_mode_per_channel() -> None:
    raster = raster_from_rgb([
        [(10, 0, 5), (10, 1, 5), (20, 1, 6)],
        [(20, 2, 6), (10, 2, 6), (30, 2, 7)],
        [(30, 3, 7), (30, 3, 8), (10, 3, 8)],
    ])
    # R: 10 wins outright. G: 2 and 3 tie, smallest wins. B: 6 wins outright.
    assert color_codec.unpack(OilEffect(1).apply_pixel(raster, 1, 1)) == (10, 2, 6)


def test_oil_window_is_clipped_at_corner() -> None:
    raster = raster_from_rgb([
        [(5, 5, 5), (9, 9, 9), (1, 1, 1)],
        [(9, 9, 9), (9, 9, 9), (1, 1, 1)],
        [(1, 1, 1), (1, 1, 1), (1, 1, 1)],
    ])
    # Corner window covers only the top-left 2x2 block.
    assert color_codec.unpack(OilEffect(1).apply_pixel(raster, 0, 0)) == (9, 9, 9)


def test_oil_range_matches_pixel_function(noisy_raster: Raster) -> None:
    oil = OilEffect(2)
    out = Raster(np.zeros_like(noisy_raster.pixels))
    part = PixelRange.from_offsets(30, 50, noisy_raster.width)
    assert oil.apply_range(noisy_raster, out, part) == 50
    for x, y in part.coordinates():
        assert out.pixels[y, x] == oil.apply_pixel(noisy_raster, x, y)


def test_oil_large_radius_uses_whole_image() -> None:
    raster = raster_from_rgb([[(1, 1, 1), (2, 2, 2)], [(2, 2, 2), (3, 3, 3)]])
    out = _apply(OilEffect(10), raster)
    assert rgb_rows(out) == [[(2, 2, 2)] * 2] * 2


@pytest.mark.parametrize("radius", [-1, -5])
def test_oil_rejects_negative_radius(radius: int) -> None:
    with pytest.raises(ArgumentError):
        OilEffect(radius)


def test_oil_rejects_non_integer_radius() -> None:
    with pytest.raises(ArgumentError):
        OilEffect(1.5)
