"""invert <input-file> <thread-count> — invert every channel of an image."""
import sys
from typing import List, Optional

from .. import config
from ..models.transforms import Invert
from ..pipeline.concurrent_filter import process_file
from .common import FilterArgumentParser, positive_int, run_cli


def build_parser() -> FilterArgumentParser:
    parser = FilterArgumentParser(
        prog="invert",
        description="Invert an image using parallel worker threads.",
    )
    parser.add_argument("input_file", help="image to invert")
    parser.add_argument("thread_count", type=positive_int("thread count"), help="number of worker threads (>= 1)")
    parser.add_argument("-o", "--output", default=config.INVERT_OUTPUT_PATH, help=f"output file (default: {config.INVERT_OUTPUT_PATH})")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    return run_cli(
        build_parser(),
        argv,
        lambda args: process_file(args.input_file, args.output, Invert(), args.thread_count),
    )


if __name__ == "__main__":
    sys.exit(main())
