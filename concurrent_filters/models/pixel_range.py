from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class PixelRange:
    """
    Contiguous interval of row-major scan order, both endpoints inclusive.
    Not a rectangle: it may start mid-row and wrap onto following rows.

    An empty range has its end one scan position before its start.
    """
    start_x: int
    start_y: int
    end_x: int
    end_y: int
    width: int # Image width, needed to map (x, y) <-> scan offset.

    @classmethod
    def from_offsets(cls, start: int, count: int, width: int) -> PixelRange:
        """Range of `count` pixels beginning at scan offset `start`."""
        start_y, start_x = divmod(start, width)
        end_y, end_x = divmod(start + count - 1, width)
        return cls(start_x, start_y, end_x, end_y, width)

    @property
    def start(self) -> int:
        return self.start_y * self.width + self.start_x

    @property
    def end(self) -> int:
        return self.end_y * self.width + self.end_x

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) for every pixel of the range in scan order."""
        for offset in range(self.start, self.end + 1):
            y, x = divmod(offset, self.width)
            yield x, y

    def row_spans(self) -> Iterator[Tuple[int, int, int]]:
        """
        Yield (y, x_first, x_last) for each row the range touches, in scan order.
        x_last is inclusive.
        """
        if self.is_empty:
            return
        for y in range(self.start_y, self.end_y + 1):
            x_first = self.start_x if y == self.start_y else 0
            x_last = self.end_x if y == self.end_y else self.width - 1
            yield y, x_first, x_last

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.start_x, self.start_y, self.end_x, self.end_y
