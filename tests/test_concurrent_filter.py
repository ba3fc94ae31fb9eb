from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from concurrent_filters.models.errors import ArgumentError, WorkerFailure
from concurrent_filters.models.raster import Raster
from concurrent_filters.models.transforms import Invert, OilEffect, Transform
from concurrent_filters.pipeline.concurrent_filter import apply_filter, process_file
from concurrent_filters.repositories.raster_repository import RasterRepository
from concurrent_filters.services.raster_service import RasterService


class ExplodingTransform(Transform):
    name = "exploding"

    def apply_range(self, source, target, pixel_range):
        if pixel_range.start == 0:
            raise RuntimeError("worker fault")
        return Invert().apply_range(source, target, pixel_range)


@pytest.mark.parametrize("transform", [Invert(), OilEffect(1), OilEffect(2)])
def test_output_is_identical_for_any_worker_count(noisy_raster: Raster, transform: Transform) -> None:
    reference = apply_filter(noisy_raster, transform, 1).output.pixels
    for threads in (2, 7, noisy_raster.total_pixels + 5):
        assert np.array_equal(apply_filter(noisy_raster, transform, threads).output.pixels, reference)


def test_apply_filter_reports_critical_path(noisy_raster: Raster) -> None:
    run = apply_filter(noisy_raster, Invert(), 4)
    assert len(run.results) == 4
    assert run.processing_ms == max(r.elapsed_ms for r in run.results)


def test_apply_filter_does_not_modify_input(noisy_raster: Raster) -> None:
    before = noisy_raster.pixels.copy()
    apply_filter(noisy_raster, OilEffect(1), 3)
    assert np.array_equal(noisy_raster.pixels, before)


def test_oil_radius_zero_pipeline_is_identity(noisy_raster: Raster) -> None:
    assert np.array_equal(apply_filter(noisy_raster, OilEffect(0), 5).output.pixels, noisy_raster.pixels)


@pytest.mark.parametrize("threads", [0, -1])
def test_invalid_thread_count_rejected_before_loading(tmp_path: Path, threads: int) -> None:
    class NoLoadService(RasterService):
        def load(self, path):
            raise AssertionError("image must not be loaded")

    with pytest.raises(ArgumentError):
        process_file(tmp_path / "in.png", tmp_path / "out.png", Invert(), threads, raster_service=NoLoadService())


def test_process_file_round_trip(tmp_path: Path, noisy_raster: Raster) -> None:
    src = tmp_path / "in.png"
    dst = tmp_path / "out.png"
    RasterRepository.save(noisy_raster, src)

    run = process_file(src, dst, Invert(), 3)

    assert run.output.path == dst
    assert np.array_equal(RasterRepository.load(dst).pixels, noisy_raster.pixels ^ 0xFFFFFF)


def test_worker_failure_prevents_save(tmp_path: Path, noisy_raster: Raster) -> None:
    src = tmp_path / "in.png"
    dst = tmp_path / "out.png"
    RasterRepository.save(noisy_raster, src)

    with pytest.raises(WorkerFailure):
        process_file(src, dst, ExplodingTransform(), 3)
    assert not dst.exists()


def test_missing_input_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        process_file(tmp_path / "missing.png", tmp_path / "out.png", Invert(), 2)
