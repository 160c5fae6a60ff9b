"""Review batches of records, flag their validation findings, and export what is visible."""
from datareview.core import (
    Finding,
    Record,
    WATCHED_FIELDS,
    configure_logging,
    get_config_value,
)
from datareview.export import (
    EXPORT_FILENAME,
    EXPORT_HEADERS,
    build_download,
    flatten_record,
    render_csv,
    write_csv,
    write_excel,
)
from datareview.ingestion import RecordFetchError, fetch_records
from datareview.review import (
    DismissTarget,
    InteractionState,
    LoadPhase,
    PointerPosition,
    RecordStore,
    ReviewSession,
    SeverityTier,
    filter_records,
    severity_tier,
)

__all__ = [
    "DismissTarget",
    "EXPORT_FILENAME",
    "EXPORT_HEADERS",
    "Finding",
    "InteractionState",
    "LoadPhase",
    "PointerPosition",
    "Record",
    "RecordFetchError",
    "RecordStore",
    "ReviewSession",
    "SeverityTier",
    "WATCHED_FIELDS",
    "build_download",
    "configure_logging",
    "fetch_records",
    "filter_records",
    "flatten_record",
    "get_config_value",
    "render_csv",
    "severity_tier",
    "write_csv",
    "write_excel",
]
