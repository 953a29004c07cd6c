#!/usr/bin/env python3
"""
CILV - Main Entry Point
Run the CI Log Viewer terminal UI on a log file or URL
"""
import argparse
import sys
import traceback

from CILV.config import load_settings
from CILV.log_analysis import LogReader
from CILV.UI import run_app
from CILV.util import configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cilv",
        description="Browse a CI test log grouped by suite and test sections.",
    )
    parser.add_argument("source", help="path or http(s) URL of the raw log")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    settings = load_settings()
    configure_logging(settings)
    reader = LogReader(timeout=settings.request_timeout, user_agent=settings.user_agent)

    try:
        run_app(args.source, reader)
    except KeyboardInterrupt:
        print("\nCILV terminated by user")
    except Exception as e:
        print(f"\nError running CILV: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
