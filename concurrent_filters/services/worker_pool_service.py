from __future__ import annotations

import concurrent.futures as cf
import logging
import time
from typing import List, Sequence

from tqdm import tqdm

from .. import config
from ..models.errors import WorkerFailure
from ..models.pixel_range import PixelRange
from ..models.raster import Raster
from ..models.transforms import Transform
from ..models.worker_result import WorkerResult

logger = logging.getLogger(__name__)


def process_range(
    worker_index: int,
    pixel_range: PixelRange,
    transform: Transform,
    source: Raster,
    target: Raster,
) -> WorkerResult:
    """
    One worker's task. Reads only *source*; writes only the cells of
    *pixel_range* in *target*, which no other worker owns.
    """
    started = time.perf_counter()
    written = transform.apply_range(source, target, pixel_range)
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    return WorkerResult(
        worker_index=worker_index,
        pixel_range=pixel_range,
        elapsed_ms=elapsed_ms,
        pixels_processed=written,
    )


class WorkerPoolService:
    """
    Fork-join over a fixed set of pixel ranges: one task per non-empty range,
    then block until all of them are done.
    """

    def __init__(self, show_progress: bool | None = None):
        self.show_progress = config.SHOW_WORKER_PROGRESS if show_progress is None else show_progress

    def run(
        self,
        ranges: Sequence[PixelRange],
        transform: Transform,
        source: Raster,
        target: Raster,
    ) -> List[WorkerResult]:
        """
        Apply *transform* to every range concurrently. Returns results in
        range order. Raises WorkerFailure once all workers have finished if
        any of them raised.
        """
        if (source.width, source.height) != (target.width, target.height):
            raise ValueError(
                f"Output raster is {target.width}x{target.height}, "
                f"input is {source.width}x{source.height}"
            )

        jobs = [(index, r) for index, r in enumerate(ranges) if not r.is_empty]
        skipped = len(ranges) - len(jobs)
        if skipped:
            logger.info("Skipping %d worker(s) with empty ranges", skipped)
        if not jobs:
            return []

        results: dict[int, WorkerResult] = {}
        failures = []
        with cf.ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="filter-worker") as ex:
            futures = {
                ex.submit(process_range, index, pixel_range, transform, source, target): index
                for index, pixel_range in jobs
            }
            # Join barrier: as_completed only returns once every future is done.
            done = cf.as_completed(futures)
            if self.show_progress:
                done = tqdm(done, total=len(futures), desc=transform.name, ncols=70)
            for fut in done:
                index = futures[fut]
                err = fut.exception()
                if err is not None:
                    logger.error("Worker %d failed: %s", index, err)
                    failures.append((index, err))
                    continue
                results[index] = fut.result()
                logger.debug("Worker %d finished in %.2fms", index, results[index].elapsed_ms)

        if failures:
            failures.sort(key=lambda item: item[0])
            raise WorkerFailure(failures) from failures[0][1]

        return [results[index] for index, _ in jobs]

    @staticmethod
    def critical_path_ms(results: Sequence[WorkerResult]) -> float:
        """Slowest worker's elapsed time; 0 when nothing ran."""
        return max((r.elapsed_ms for r in results), default=0.0)
