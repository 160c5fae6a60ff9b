"""Shared configuration helpers for the datareview package."""
import logging
import os
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


def get_config_value(key: str, default: str = "") -> str:
    """Get a setting such as ``DATA_REVIEW_SOURCE`` from Streamlit secrets or the environment.

    Secrets win so a hosted dashboard can point at its own record API while
    local runs and the CLI read plain environment variables.
    """
    try:
        import streamlit as st
        if hasattr(st, "secrets") and key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass
    except Exception as exc:  # newer Streamlit raises its own error when secrets.toml is absent
        logger.debug("Streamlit secrets unavailable for %s: %s", key, exc)

    return os.getenv(key, default)


def get_config_float(key: str) -> Optional[float]:
    """Return a numeric setting, or ``None`` when it is unset or blank."""

    raw = get_config_value(key, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a number of seconds, got {raw!r}") from exc


def load_env_file(path: Path) -> List[str]:
    """Load ``KEY=value`` lines such as ``secrets/sheets.env`` without overriding the environment.

    Returns the keys that were newly set.
    """
    if not path.exists():
        return []

    loaded: List[str] = []
    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                if not key or key in os.environ:
                    continue
                os.environ[key] = value.strip().strip('"').strip("'")
                loaded.append(key)
    except OSError as exc:
        logger.debug("Could not load env file %s: %s", path, exc)
    if loaded:
        logger.info("Loaded %d settings from %s", len(loaded), path)
    return loaded
