from __future__ import annotations
from typing import List, Tuple


class ArgumentError(ValueError):
    """Missing, non-numeric or out-of-range user argument (thread count, radius)."""


class PartitionError(RuntimeError):
    """The computed pixel ranges do not cover the image exactly once."""


class WorkerFailure(RuntimeError):
    """
    One or more workers raised while processing their pixel range.

    Raised only after every worker has finished, so `failures` is complete.
    """

    def __init__(self, failures: List[Tuple[int, BaseException]]):
        self.failures = failures
        details = "; ".join(
            f"worker {index}: {type(err).__name__}: {err}" for index, err in failures
        )
        super().__init__(f"{len(failures)} worker(s) failed ({details})")
