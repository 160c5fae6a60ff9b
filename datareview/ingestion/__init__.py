"""Record retrieval for the review surface."""
from datareview.ingestion.loader import (
    DEFAULT_SOURCE,
    RecordFetchError,
    fetch_records,
    parse_payload,
    resolve_source,
)

__all__ = [
    "DEFAULT_SOURCE",
    "RecordFetchError",
    "fetch_records",
    "parse_payload",
    "resolve_source",
]
