"""oil <input-file> <radius> <thread-count> — oil-painting effect."""
import sys
from typing import List, Optional

from .. import config
from ..models.transforms import OilEffect
from ..pipeline.concurrent_filter import process_file
from .common import FilterArgumentParser, non_negative_int, positive_int, run_cli


def build_parser() -> FilterArgumentParser:
    parser = FilterArgumentParser(
        prog="oil",
        description="Apply an oil-painting (per-channel mode) filter using parallel worker threads.",
    )
    parser.add_argument("input_file", help="image to filter")
    parser.add_argument("radius", type=non_negative_int("oil radius"), help="window radius in pixels (>= 0)")
    parser.add_argument("thread_count", type=positive_int("thread count"), help="number of worker threads (>= 1)")
    parser.add_argument("-o", "--output", default=config.OIL_OUTPUT_PATH, help=f"output file (default: {config.OIL_OUTPUT_PATH})")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    return run_cli(
        build_parser(),
        argv,
        lambda args: process_file(args.input_file, args.output, OilEffect(args.radius), args.thread_count),
    )


if __name__ == "__main__":
    sys.exit(main())
