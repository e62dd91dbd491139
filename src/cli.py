"""Command-line entry point.

Run with: python -m src.cli transactions.csv > accounts.csv
"""

import argparse
import logging
import sys

from config.settings import settings
from src.tp_ingest.csv_processor import process_csv_file
from src.tp_ingest.report import write_account_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transaction-processor",
        description=(
            "A transaction processing engine that processes CSV files "
            "containing financial transactions"
        ),
    )
    parser.add_argument("csv_file", help="Input CSV file containing transactions")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print detailed error messages to stderr",
    )
    parser.add_argument("--version", action="version", version=settings.APP_VERSION)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = process_csv_file(args.csv_file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        for error in result.errors:
            print(error, file=sys.stderr)

    write_account_report(result.database, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
