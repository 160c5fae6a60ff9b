"""Presentation helpers that turn records into rows for the review table and detail panel."""
from typing import Any, Dict, Iterable, List

from datareview.core.models import WATCHED_FIELDS, Record, field_text
from datareview.review.severity import SeverityTier, severity_tier

TABLE_COLUMNS = ["ID", "Name", "Email", "Street", "City", "Zipcode", "Phone", "Status", "Issues"]

TIER_BADGES = {
    SeverityTier.CRITICAL: "🔴",
    SeverityTier.WARNING: "🟡",
    SeverityTier.NONE: "",
}


def status_badge(status: str) -> str:
    """Return a color-coded label for the record status."""

    mapping = {
        "active": "🟢 Active",
        "inactive": "⚫ Inactive",
        "pending": "🟠 Pending",
    }
    return mapping.get(status, f"⚪ {status}")


def field_cell(record: Record, field_name: str) -> str:
    """Render a table cell, prefixing the severity badge when the field has a finding."""

    value = field_text(getattr(record, field_name))
    badge = TIER_BADGES[severity_tier(record.finding(field_name))]
    return f"{badge} {value}".strip() if badge else value


def records_to_rows(records: Iterable[Record]) -> List[Dict[str, Any]]:
    """Convert records to dictionaries for tabular rendering."""

    rows = []
    for record in records:
        rows.append(
            {
                "ID": record.id,
                "Name": record.name,
                "Email": field_cell(record, "email"),
                "Street": field_cell(record, "street"),
                "City": field_text(record.city),
                "Zipcode": field_cell(record, "zipcode"),
                "Phone": field_cell(record, "phone"),
                "Status": status_badge(record.status),
                "Issues": issue_summary(record),
            }
        )
    return rows


def detail_entries(record: Record) -> List[Dict[str, str]]:
    """List one entry per present finding for the detail panel."""

    entries = []
    for name in WATCHED_FIELDS:
        finding = record.finding(name)
        if finding is None:
            continue
        tier = severity_tier(finding)
        entries.append(
            {
                "Field": name,
                "Severity": f"{TIER_BADGES[tier]} {tier.value}",
                "Message": finding.message,
            }
        )
    return entries


def issue_count(record: Record) -> int:
    return sum(1 for name in WATCHED_FIELDS if record.finding(name) is not None)


def issue_summary(record: Record) -> str:
    """Join every finding message into one cell so the table shows them without opening the detail."""

    issues = [f"{entry['Field']}: {entry['Message']}" for entry in detail_entries(record)]
    return f"⚠️ {'; '.join(issues)}" if issues else ""
