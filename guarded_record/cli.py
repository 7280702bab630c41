"""Command-line entrypoint running the guarded record scenarios."""
from __future__ import annotations

import argparse
import logging
import sys

from guarded_record.application.scenarios import SCENARIOS
from guarded_record.config import SETTINGS
from guarded_record.presentation.record_report import render_csv

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run guarded record demonstrations")
    parser.add_argument(
        "scenarios",
        nargs="*",
        help=f"Scenarios to run: {', '.join(SCENARIOS)} (default: all)",
    )
    parser.add_argument("--csv", action="store_true", help="Print each final record as CSV")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=SETTINGS.log_level,
        help="Logging level",
    )
    args = parser.parse_args(argv)
    unknown = [name for name in args.scenarios if name not in SCENARIOS]
    if unknown:
        parser.error(f"unknown scenario(s): {', '.join(unknown)}")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=args.log_level, format=SETTINGS.log_format)

    for name in args.scenarios or list(SCENARIOS):
        outcome = SCENARIOS[name]()
        print(outcome.name)
        print("=" * len(outcome.name))
        for line in outcome.lines:
            print(line)
        if args.csv:
            print(render_csv(outcome.record).decode("utf-8").rstrip())
        print()

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
