"""Command-line export of the records matching a search query."""
import argparse
import logging
import sys
from pathlib import Path

from datareview.core.logging import configure_logging
from datareview.export.sinks import (
    EXPORT_FILENAME,
    push_to_google_sheets,
    resolve_sheets_target,
    write_csv,
    write_excel,
)
from datareview.export.templates import flatten_records
from datareview.ingestion.loader import fetch_records, resolve_source
from datareview.review.session import ReviewSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create a small argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Export reviewed records with their validation findings")
    parser.add_argument(
        "--source",
        help="URL or JSON file returning {\"records\": [...]} (defaults to DATA_REVIEW_SOURCE)",
    )
    parser.add_argument(
        "--query",
        default="",
        help="Only export records whose fields contain this text (case-insensitive)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("output") / EXPORT_FILENAME,
        help="CSV file to write the visible records to",
    )
    parser.add_argument(
        "--sink",
        choices=["csv", "sheets", "excel"],
        default="csv",
        help="Where to forward exported rows after writing the CSV",
    )
    parser.add_argument(
        "--spreadsheet-id",
        help="Google Sheets spreadsheet ID for the sheets sink",
    )
    parser.add_argument(
        "--worksheet",
        help="Worksheet title inside the Google Sheets document",
    )
    parser.add_argument(
        "--service-account",
        type=Path,
        help="Path to a Google service account JSON key used for Sheets pushes",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Excel file to write when --sink=excel (defaults to the CSV path with .xlsx)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for exporting records from the command line."""

    configure_logging()
    args = build_parser().parse_args(argv)
    source = resolve_source(args.source)

    session = ReviewSession()
    session.load(lambda: fetch_records(source))
    if session.store.error:
        print(session.store.error, file=sys.stderr)
        return 1

    session.search(args.query)
    rows = flatten_records(session.visible_records)
    write_csv(rows, args.output)
    logger.info("Wrote %d rows to %s", len(rows), args.output)

    if args.sink == "excel":
        excel_target = args.excel_output or args.output.with_suffix(".xlsx")
        write_excel(rows, excel_target)
        logger.info("Wrote Excel output to %s", excel_target)
    elif args.sink == "sheets":
        target = resolve_sheets_target(args.spreadsheet_id, args.worksheet, args.service_account)
        push_to_google_sheets(rows, **target)

    print(f"Wrote {len(rows)} records to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
