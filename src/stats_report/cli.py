"""Command-line entry point printing mean, median and mode of a number listing."""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from stats_report.errors import StatsReportError, log_error
from stats_report.logging import configure_logging, get_log_level, get_logger
from stats_report.report import Average, compute_statistic, parse_statistic, to_json_value
from stats_report.sources.factory import create_source
from stats_report.types import SourceConfig, Statistic

logger = get_logger(__name__)

ALL_STATISTICS = "all"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the mean, median and mode of a newline-delimited number listing.",
    )
    parser.add_argument(
        "location",
        help="Path to a text file, or an http(s) URL, holding one number per line.",
    )
    parser.add_argument(
        "--statistic",
        choices=[s.value for s in Statistic] + [ALL_STATISTICS],
        default=ALL_STATISTICS,
        help="Statistic to compute (default: all).",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of local files (default: utf-8).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        metavar="SECONDS",
        help="Download timeout for URLs in seconds (default: 30).",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level for diagnostic output (default: $STATS_REPORT_LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a single JSON object instead of one line per statistic.",
    )
    return parser


async def collect_statistics(
    average: Average, statistics: List[Statistic]
) -> dict[Statistic, float | list[float]]:
    """Each statistic is computed against its own fetch, one after another."""
    results = {}
    for statistic in statistics:
        results[statistic] = await compute_statistic(average, statistic)
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_log_level())

    if args.statistic == ALL_STATISTICS:
        statistics = list(Statistic)
    else:
        statistics = [parse_statistic(args.statistic)]

    config = SourceConfig(location=args.location, encoding=args.encoding, timeout=args.timeout)
    average = Average(create_source(config))

    try:
        results = asyncio.run(collect_statistics(average, statistics))
    except StatsReportError as e:
        log_error(e, {"location": args.location}, logger)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({s.value: to_json_value(v) for s, v in results.items()}))
    else:
        for statistic, value in results.items():
            print(f"{statistic.value}: {value}")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
