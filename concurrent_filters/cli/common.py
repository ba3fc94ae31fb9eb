"""Shared plumbing for the `invert` and `oil` console scripts."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from ..config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL
from ..models.errors import ArgumentError, WorkerFailure
from ..pipeline.concurrent_filter import FilterRun

EXIT_OK = 0
EXIT_FAILURE = 1


class FilterArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ArgumentError instead of exiting with status 2."""

    def error(self, message):
        raise ArgumentError(message)


def non_negative_int(label: str) -> Callable[[str], int]:
    def parse(raw: str) -> int:
        try:
            value = int(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid {label}: {raw!r} is not an integer") from None
        if value < 0:
            raise argparse.ArgumentTypeError(f"invalid {label}: must be >= 0, got {value}")
        return value
    return parse


def positive_int(label: str) -> Callable[[str], int]:
    def parse(raw: str) -> int:
        value = non_negative_int(label)(raw)
        if value < 1:
            raise argparse.ArgumentTypeError(f"invalid {label}: must be >= 1, got {value}")
        return value
    return parse


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def report(run: FilterRun) -> None:
    print(f"Processing time: {int(run.processing_ms)}ms")


def run_cli(
    parser: argparse.ArgumentParser,
    argv: Optional[List[str]],
    action: Callable[[argparse.Namespace], FilterRun],
) -> int:
    """
    Parse *argv*, run *action* and translate every failure into exit status 1
    with a message on stderr.
    """
    configure_logging()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as err:
        print(f"Error: {err}", file=sys.stderr)
        print(parser.format_usage(), end="", file=sys.stderr)
        return EXIT_FAILURE

    try:
        run = action(args)
    except ArgumentError as err:
        print(f"Error: {err}", file=sys.stderr)
        return EXIT_FAILURE
    except WorkerFailure as err:
        print(f"Error: {err}", file=sys.stderr)
        return EXIT_FAILURE
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return EXIT_FAILURE

    report(run)
    return EXIT_OK
