"""Export destinations for the visible review subset."""
from datareview.export.sinks import (
    EXPORT_FILENAME,
    ExportArtifact,
    build_download,
    ensure_output_dir,
    push_to_google_sheets,
    render_csv,
    resolve_sheets_target,
    write_csv,
    write_excel,
)
from datareview.export.templates import EXPORT_HEADERS, flatten_record, flatten_records

__all__ = [
    "EXPORT_FILENAME",
    "EXPORT_HEADERS",
    "ExportArtifact",
    "build_download",
    "ensure_output_dir",
    "flatten_record",
    "flatten_records",
    "push_to_google_sheets",
    "render_csv",
    "resolve_sheets_target",
    "write_csv",
    "write_excel",
]
