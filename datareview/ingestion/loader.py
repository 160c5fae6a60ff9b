"""Fetch collaborator that retrieves the record batch for review."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import requests

from datareview.core.models import Record
from datareview.core.utils import get_config_float, get_config_value

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "dummy_data/records.json"


class RecordFetchError(RuntimeError):
    """Raised when the fetched payload is not shaped as ``{"records": [...]}``."""


def resolve_source(source: str | None = None) -> str:
    """Return the explicit source, the configured ``DATA_REVIEW_SOURCE``, or the bundled sample."""

    return source or get_config_value("DATA_REVIEW_SOURCE", DEFAULT_SOURCE)


def _read_payload(source: str) -> Any:
    if source.startswith(("http://", "https://")):
        logger.info("Fetching records from %s", source)
        response = requests.get(source, timeout=get_config_float("DATA_REVIEW_FETCH_TIMEOUT"))
        response.raise_for_status()
        return response.json()

    path = Path(source)
    logger.info("Loading records from %s", path)
    return json.loads(path.read_text(encoding="utf-8"))


def parse_payload(payload: Any) -> List[Record]:
    """Convert a ``{"records": [...]}`` payload into records with unique ids."""

    if not isinstance(payload, dict) or not isinstance(payload.get("records"), list):
        raise RecordFetchError("Payload must be an object with a 'records' list")

    records: List[Record] = []
    seen: Dict[int, Record] = {}
    for entry in payload["records"]:
        record = Record.from_dict(entry)
        if record.id in seen:
            raise RecordFetchError(f"Duplicate record id {record.id} in payload")
        seen[record.id] = record
        records.append(record)
    return records


def fetch_records(source: str | None = None) -> List[Record]:
    """Retrieve and parse the record batch from a URL or a local JSON file."""

    records = parse_payload(_read_payload(resolve_source(source)))
    logger.info("Fetched %d records", len(records))
    return records
