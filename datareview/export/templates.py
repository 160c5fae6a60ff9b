"""Flatten records and their findings into the export column layout."""
from typing import Dict, Iterable, List

from datareview.core.models import SCALAR_FIELDS, WATCHED_FIELDS, Record, field_text

RECORD_HEADERS = list(SCALAR_FIELDS)
FINDING_HEADERS = [
    column
    for name in WATCHED_FIELDS
    for column in (f"{name}_error", f"{name}_severity")
]
EXPORT_HEADERS = RECORD_HEADERS + FINDING_HEADERS


def flatten_record(record: Record) -> Dict[str, str]:
    """Convert a record into one export row where every value is a string."""

    row = {header: field_text(getattr(record, header)) for header in RECORD_HEADERS}
    for name in WATCHED_FIELDS:
        finding = record.finding(name)
        row[f"{name}_error"] = finding.message if finding else ""
        row[f"{name}_severity"] = finding.severity if finding else ""
    return row


def flatten_records(records: Iterable[Record]) -> List[Dict[str, str]]:
    return [flatten_record(record) for record in records]
