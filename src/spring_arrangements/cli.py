"""
Command line entry point: count arrangements for condition record lines.

    spring-arrangements "???.### 1,1,3" ".??..??...?##. 1,1,3" --unfold

Prints one count per line, in argument order. All lines are parsed before
any counting starts; a malformed line exits with status 2 and no output.
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

from spring_arrangements import __version__
from spring_arrangements.core import ParseError, parse_line
from spring_arrangements.counter import (
    DEFAULT_UNFOLD_FACTOR,
    ArrangementCounter,
    CounterConfig,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spring-arrangements",
        description="Count the arrangements of damaged springs matching each record line",
    )
    parser.add_argument(
        "lines",
        nargs="+",
        metavar="LINE",
        help='Record line: cells then comma-separated run lengths, e.g. "???.### 1,1,3"',
    )
    parser.add_argument(
        "--unfold",
        action="store_true",
        help="Unfold each record before counting",
    )
    parser.add_argument(
        "--factor",
        type=int,
        default=DEFAULT_UNFOLD_FACTOR,
        help=f"Copies made when unfolding (default {DEFAULT_UNFOLD_FACTOR})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = CounterConfig(unfold_factor=args.factor)
    except ValueError as e:
        parser.error(str(e))

    try:
        parsed = [parse_line(line) for line in args.lines]
    except ParseError as e:
        logger.error(f"Error: {e}")
        return EXIT_BAD_INPUT

    counter = ArrangementCounter(config)
    start = time.perf_counter()
    for record, runs in parsed:
        print(counter.count_record(record, runs, unfold=args.unfold))

    logger.debug(f"Counted {len(parsed)} record(s) in {time.perf_counter() - start:.3f}s")
    logger.debug(counter.cache.stats)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
