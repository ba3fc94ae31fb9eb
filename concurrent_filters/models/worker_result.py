from __future__ import annotations
from dataclasses import dataclass
from .pixel_range import PixelRange


@dataclass(frozen=True)
class WorkerResult:
    """
    Diagnostic outcome of one worker. Never used for correctness.
    """
    worker_index: int        # Position of the worker's range in the partition
    pixel_range: PixelRange  # Cells this worker owned in the output raster
    elapsed_ms: float        # Wall-clock compute time of the worker
    pixels_processed: int    # Number of output cells written
