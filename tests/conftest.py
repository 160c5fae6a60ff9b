"""Pytest configuration to make the local package importable without installation."""
import json
import sys
from pathlib import Path
from typing import List

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datareview.core.models import Finding, Record


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of the tests."""

    for key in (
        "DATA_REVIEW_SOURCE",
        "DATA_REVIEW_FETCH_TIMEOUT",
        "GOOGLE_SHEETS_SPREADSHEET_ID",
        "GOOGLE_SHEETS_WORKSHEET",
        "GOOGLE_SHEETS_SERVICE_ACCOUNT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def dummy_source() -> Path:
    """Return the bundled sample payload."""

    return ROOT / "dummy_data" / "records.json"


@pytest.fixture
def sample_records() -> List[Record]:
    """A small batch covering findings, missing optional fields, and an unknown status."""

    return [
        Record(
            id=1,
            name="Ann Lee",
            email="ann@example",
            street="1 Main St",
            city="Springfield",
            zipcode="12345",
            phone="555-1234",
            status="active",
            errors={"email": Finding("Invalid email format", "critical")},
        ),
        Record(
            id=2,
            name="Bob Stone",
            email="bob@example.com",
            city="Shelbyville",
            status="pending",
            errors={
                "phone": Finding("Phone number is missing", "warning"),
                "street": Finding("Street address is missing", "warning"),
            },
        ),
        Record(
            id=13,
            name="Cara Diaz",
            email="cara@example.com",
            street="9 Oak Ave",
            zipcode="ABC",
            status="archived",
            errors={"zipcode": Finding("Zipcode must be numeric", "critical")},
        ),
    ]


@pytest.fixture
def write_payload(tmp_path: Path):
    """Write a ``{"records": [...]}`` payload to disk and return its path."""

    def _write(payload, name: str = "records.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
