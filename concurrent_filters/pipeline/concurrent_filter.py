"""
Concurrent Filter Pipeline
Loads an image, splits its pixels across workers, applies one transform and
saves the result. Nothing is written unless every worker succeeded.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from ..models.errors import ArgumentError
from ..models.raster import Raster
from ..models.transforms import Transform
from ..models.worker_result import WorkerResult
from ..services.partition_service import PartitionService
from ..services.raster_service import RasterService
from ..services.worker_pool_service import WorkerPoolService

logger = logging.getLogger(__name__)


@dataclass
class FilterRun:
    """Outcome of one filter run: the output raster plus per-worker timings."""
    output: Raster
    results: List[WorkerResult]
    processing_ms: float  # Critical path: slowest worker


def validate_thread_count(threads: int) -> int:
    if isinstance(threads, bool) or not isinstance(threads, int):
        raise ArgumentError(f"Thread count must be an integer, got {threads!r}")
    if threads < 1:
        raise ArgumentError(f"Thread count must be >= 1, got {threads}")
    return threads


def apply_filter(
    source: Raster,
    transform: Transform,
    threads: int,
    *,
    output_path: Union[str, Path, None] = None,
    raster_service: RasterService = RasterService(),
    partition_service: PartitionService = PartitionService(),
    worker_pool_service: WorkerPoolService = WorkerPoolService(),
) -> FilterRun:
    """
    In-memory part of the pipeline:
        • partition the scan order into `threads` ranges
        • create the output raster once
        • run one worker per non-empty range and join them all
    """
    validate_thread_count(threads)

    width, height = raster_service.get_raster_dimensions(source)
    ranges = partition_service.partition(width, height, threads)
    output = raster_service.create_output_for(source, output_path)

    logger.info("Applying %s to %dx%d image with %d worker(s)", transform.name, width, height, threads)
    results = worker_pool_service.run(ranges, transform, source, output)
    processing_ms = worker_pool_service.critical_path_ms(results)
    logger.info("%s finished, slowest worker took %.2fms", transform.name, processing_ms)

    return FilterRun(output=output, results=results, processing_ms=processing_ms)


def process_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    transform: Transform,
    threads: int,
    *,
    fmt: str | None = None,
    raster_service: RasterService = RasterService(),
    partition_service: PartitionService = PartitionService(),
    worker_pool_service: WorkerPoolService = WorkerPoolService(),
) -> FilterRun:
    """
    Full pipeline: load → apply_filter → save.

    Arguments are validated before the input file is touched.
    """
    validate_thread_count(threads)

    source = raster_service.load(input_path)
    run = apply_filter(
        source,
        transform,
        threads,
        output_path=output_path,
        raster_service=raster_service,
        partition_service=partition_service,
        worker_pool_service=worker_pool_service,
    )
    saved = raster_service.save(run.output, output_path, fmt)
    logger.info("Wrote %s", saved)
    return run
