"""``fars`` command line.

Usage:
    fars read 2014
    fars summarize 2013 2014 2015 --output summary.csv
    fars map 22 2014 --output plots/louisiana_2014.png
    fars --config my_config.py --data-dir /data/fars summarize 2013 2014
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from fars.contracts import FarsError
from fars.cli.run import build_runtime_config, run_map, run_read, run_summarize

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure the root logger with console and optional file output."""
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.debug("Logging: level=%s, file=%s", level, log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fars",
        description="Read, summarize and map FARS fatal accident data",
    )
    parser.add_argument("--config", help="Path to user config file (Python file with CONFIG dict)")
    parser.add_argument("--data-dir", help="Directory holding accident_<year>.csv.bz2 files")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_read = sub.add_parser("read", help="Show the records of one year")
    p_read.add_argument("year", help="Data year")
    p_read.add_argument("--rows", type=int, default=5, help="Number of rows to print")

    p_sum = sub.add_parser("summarize", help="Accident counts by month and year")
    p_sum.add_argument("years", nargs="+", help="Data years")
    p_sum.add_argument("--output", help="Write the summary to this CSV file")
    p_sum.add_argument("--fill-value", type=int, help="Count to use for months with no accidents")

    p_map = sub.add_parser("map", help="Map accident locations of one state")
    p_map.add_argument("state", help="FARS state number (e.g. 22 for Louisiana)")
    p_map.add_argument("year", help="Data year")
    p_map.add_argument("--output", help="Save the map to this image file")
    p_map.add_argument("--show", action="store_true", help="Display the map window")
    p_map.add_argument("--boundary", help="State boundary file or URL (shapefile/GeoJSON); default Census states")
    p_map.add_argument("--no-boundary", action="store_true", help="Do not draw the state outline")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "map" and not (args.output or args.show):
        parser.error("map needs --output or --show")

    cli_args = {
        "data_dir": args.data_dir,
        "log_level": "DEBUG" if args.verbose else None,
        "fill_value": getattr(args, "fill_value", None),
        "boundary_path": getattr(args, "boundary", None),
        "draw_boundary": False if getattr(args, "no_boundary", False) else None,
        "show": True if getattr(args, "show", False) else None,
    }

    try:
        config = build_runtime_config(args.config, cli_args)
    except (OSError, ImportError, ValueError, ValidationError) as e:
        setup_logging("INFO", args.log_file)
        logger.error("Invalid configuration: %s", e)
        return 2

    setup_logging(config.logging.level, args.log_file)

    try:
        if args.command == "read":
            run_read(args.year, config, rows=args.rows)
        elif args.command == "summarize":
            run_summarize(args.years, config, output=args.output)
        elif args.command == "map":
            run_map(args.state, args.year, config, output=args.output)
    except (FarsError, ValueError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
