"""Core building blocks for the datareview package."""
from datareview.core.logging import configure_logging
from datareview.core.models import (
    KNOWN_STATUSES,
    SCALAR_FIELDS,
    WATCHED_FIELDS,
    field_text,
    Finding,
    Record,
)
from datareview.core.utils import get_config_float, get_config_value, load_env_file

__all__ = [
    "configure_logging",
    "Finding",
    "Record",
    "KNOWN_STATUSES",
    "SCALAR_FIELDS",
    "WATCHED_FIELDS",
    "field_text",
    "get_config_float",
    "get_config_value",
    "load_env_file",
]
