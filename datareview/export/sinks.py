"""Serialize flattened review rows to CSV text, files, Excel, or Google Sheets."""
from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from datareview.core.models import Record
from datareview.core.utils import get_config_value, load_env_file
from datareview.export.templates import EXPORT_HEADERS, flatten_records

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "data_export_with_errors.csv"
EXPORT_MIME = "text/csv;charset=utf-8"


@dataclass(frozen=True)
class ExportArtifact:
    """A downloadable export document."""

    filename: str
    content: bytes
    mime: str = EXPORT_MIME


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def render_csv(rows: Iterable[Dict[str, Any]]) -> str:
    """Return CSV text with the export header; no rows still yields the header line."""

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=EXPORT_HEADERS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()


def build_download(records: Iterable[Record]) -> ExportArtifact:
    """Flatten the visible records into the fixed-name CSV download."""

    rows = flatten_records(records)
    logger.info("Exporting %d records to %s", len(rows), EXPORT_FILENAME)
    return ExportArtifact(filename=EXPORT_FILENAME, content=render_csv(rows).encode("utf-8"))


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write export rows to a CSV file with consistent headers."""

    ensure_output_dir(output_path)
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        csvfile.write(render_csv(rows))


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write export rows to an Excel workbook using openpyxl."""

    try:
        from openpyxl import Workbook
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise ImportError("openpyxl is required for Excel sinks") from exc

    ensure_output_dir(output_path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "data_review"
    sheet.append(EXPORT_HEADERS)
    for row in rows:
        sheet.append([row.get(header, "") for header in EXPORT_HEADERS])
    workbook.save(output_path)


def push_to_google_sheets(
    rows: Iterable[Dict[str, Any]],
    spreadsheet_id: str,
    worksheet_title: str = "Sheet1",
    service_account_path: Path | None = None,
) -> None:
    """Replace a Google Sheets worksheet with the header and export rows."""

    rows = list(rows)

    try:
        import gspread
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise ImportError("gspread is required for Google Sheets sinks") from exc

    client = (
        gspread.service_account(filename=str(service_account_path))
        if service_account_path
        else gspread.service_account()
    )
    worksheet = client.open_by_key(spreadsheet_id).worksheet(worksheet_title)
    worksheet.clear()
    headers: List[str] = list(EXPORT_HEADERS)
    worksheet.append_rows([headers] + [[row.get(h, "") for h in headers] for row in rows])
    logger.info("Pushed %d rows to Google Sheets worksheet %s", len(rows), worksheet_title)


DEFAULT_SERVICE_ACCOUNT_PATHS = [
    Path("secrets/service_account.json"),
    Path("credentials/service_account.json"),
]
DEFAULT_SHEETS_ENV_FILE = Path("secrets/sheets.env")


def _default_service_account_path() -> Path | None:
    for candidate in DEFAULT_SERVICE_ACCOUNT_PATHS:
        if candidate.exists():
            return candidate
    return None


def resolve_sheets_target(
    spreadsheet_id: str | None,
    worksheet_title: str | None,
    explicit_account_path: Path | None,
) -> Dict[str, Any]:
    """Fill Google Sheets settings from arguments, ``secrets/sheets.env`` and defaults."""

    load_env_file(Path(get_config_value("GOOGLE_SHEETS_ENV_FILE", str(DEFAULT_SHEETS_ENV_FILE))))
    spreadsheet_id = spreadsheet_id or get_config_value("GOOGLE_SHEETS_SPREADSHEET_ID")
    if not spreadsheet_id:
        raise ValueError("spreadsheet_id is required when sink='sheets'")

    account_env = get_config_value("GOOGLE_SHEETS_SERVICE_ACCOUNT")
    account_path = explicit_account_path or (Path(account_env) if account_env else None)
    account_path = account_path or _default_service_account_path()
    if not account_path:
        raise ValueError(
            "Provide --service-account pointing to your Google credentials or place a file at "
            f"{DEFAULT_SERVICE_ACCOUNT_PATHS[0]}"
        )

    return {
        "spreadsheet_id": spreadsheet_id,
        "worksheet_title": worksheet_title or get_config_value("GOOGLE_SHEETS_WORKSHEET", "Sheet1"),
        "service_account_path": account_path,
    }
