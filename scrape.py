#!/usr/bin/env python3
"""
Scrape NPR Tiny Desk Concert pages into JSON files.

Usage:
    python scrape.py scrape <url>
    python scrape.py archive <year> <month> [day]
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from tinydesk import config
from tinydesk.archive import scrape_archive
from tinydesk.errors import ScrapeError
from tinydesk.pipeline.concert import scrape_concert
from tinydesk.pipeline.io import LOG_TIME_FORMAT, save_run_log


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--output-dir", default=None, help="Directory for *_info.json files (default: current directory)")
    common.add_argument("--strict", action="store_true", help="Treat non-2xx concert pages as errors")
    common.add_argument("--log-file", default=None, help="Append run log to this file")

    parser = argparse.ArgumentParser(description="Extract Tiny Desk Concert metadata to JSON")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scrape_cmd = subparsers.add_parser("scrape", parents=[common], help="Scrape a single Tiny Desk Concert page")
    scrape_cmd.add_argument("url", help="URL of the Tiny Desk Concert page")

    archive_cmd = subparsers.add_parser("archive", parents=[common], help="Scrape the archive for a specific time period")
    archive_cmd.add_argument("year", help="Year in YYYY format")
    archive_cmd.add_argument("month", help="Month in MM format")
    archive_cmd.add_argument("day", nargs="?", default=None, help="Optional day in DD format")
    archive_cmd.add_argument("--delay", type=float, default=None, help="Seconds to wait between page fetches")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    log_lines = []

    def log(message, level="INFO"):
        """Log a message to both console and log buffer."""
        timestamp = datetime.utcnow().strftime(LOG_TIME_FORMAT)
        log_lines.append(f"[{timestamp}] [{level}] {message}")
        print(message, file=sys.stderr if level == "ERROR" else sys.stdout)

    log_path = Path(args.log_file) if args.log_file else config.LOG_PATH
    strict = True if args.strict else None
    exit_code = 0

    try:
        if args.command == "scrape":
            scrape_concert(args.url, output_dir=args.output_dir, strict=strict, log_func=log)
        else:
            scrape_archive(
                args.year,
                args.month,
                args.day,
                output_dir=args.output_dir,
                strict=strict,
                delay=args.delay,
                log_func=log,
            )
    except (ScrapeError, ValueError) as e:
        log(f"Error: {e}", "ERROR")
        exit_code = 1

    if log_path:
        try:
            save_run_log(log_path, log_lines)
        except ScrapeError as e:
            print(f"Error: {e}", file=sys.stderr)
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
