"""
Print a pairwise truth table over the canonical extended complex values.

Run:
    python -m extcomplex                      # pow table, one line per pair
    python -m extcomplex --op add --format grid
    python -m extcomplex --csv pow_table.csv  # also write the grid as CSV
"""

import argparse
import logging
import sys
from pathlib import Path

from .table import OPERATIONS, truth_frame, truth_lines

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
DEFAULT_OPERATION = "pow"
DEFAULT_FORMAT = "lines"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extcomplex",
        description="Dump an extended complex truth table over the canonical values.",
    )
    parser.add_argument("--op", type=str, default=DEFAULT_OPERATION, choices=list(OPERATIONS))
    parser.add_argument(
        "--format", type=str, default=DEFAULT_FORMAT, choices=["lines", "grid"]
    )
    parser.add_argument("--csv", type=Path, default=None, help="Also write the grid to this CSV file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT
    )

    if args.format == "grid" or args.csv is not None:
        frame = truth_frame(args.op)
    if args.format == "grid":
        print(frame.to_string())
    else:
        for line in truth_lines(args.op):
            print(line)

    if args.csv is not None:
        frame.to_csv(args.csv)
        logger.info("Wrote %s table to %s", args.op, args.csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
