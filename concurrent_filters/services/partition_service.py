import logging
from typing import List

from ..models.errors import ArgumentError, PartitionError
from ..models.pixel_range import PixelRange

logger = logging.getLogger(__name__)


class PartitionService:
    """
    Static split of an image's scan order into one contiguous range per worker.
    """

    @staticmethod
    def allocation(total_pixels: int, workers: int) -> List[int]:
        """
        Pixels per worker: the first `total % workers` workers take one extra,
        so no two shares differ by more than one pixel.
        """
        if workers < 1:
            raise ArgumentError(f"Worker count must be >= 1, got {workers}")
        base, remainder = divmod(total_pixels, workers)
        return [base + 1 if i < remainder else base for i in range(workers)]

    def partition(self, width: int, height: int, workers: int) -> List[PixelRange]:
        """
        Carve `workers` ranges out of the row-major scan of a width x height
        image. Workers left without pixels (workers > width*height) get an
        empty range rather than an error.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Image must be at least 1x1, got {width}x{height}")

        total = width * height
        ranges = []
        offset = 0
        for count in self.allocation(total, workers):
            ranges.append(PixelRange.from_offsets(offset, count, width))
            offset += count

        self.check_partition(ranges, width, height)
        logger.debug("Partitioned %dx%d into %d range(s)", width, height, len(ranges))
        return ranges

    @staticmethod
    def check_partition(ranges: List[PixelRange], width: int, height: int) -> None:
        """
        Raise PartitionError unless the ranges cover every pixel exactly once,
        in increasing scan order.
        """
        expected_start = 0
        for index, pixel_range in enumerate(ranges):
            if pixel_range.width != width:
                raise PartitionError(f"Range {index} built for width {pixel_range.width}, image is {width}")
            if pixel_range.size < 0:
                raise PartitionError(f"Range {index} ends before it starts: {pixel_range.as_tuple()}")
            if pixel_range.start != expected_start:
                raise PartitionError(
                    f"Range {index} starts at scan offset {pixel_range.start}, expected {expected_start}"
                )
            expected_start = pixel_range.end + 1

        if expected_start != width * height:
            raise PartitionError(f"Ranges cover {expected_start} of {width * height} pixels")
