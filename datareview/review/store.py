"""Record store holding the latest fetched batch and its load status."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from datareview.core.models import Record

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Error fetching data. Please try again later."


class LoadPhase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FETCH_FAILED = "fetch_failed"


@dataclass
class RecordStore:
    """Latest record snapshot plus the phase of the fetch that produced it."""

    records: List[Record] = field(default_factory=list)
    phase: LoadPhase = LoadPhase.LOADING
    error: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self.phase is LoadPhase.READY

    def reset(self) -> None:
        """Drop the current snapshot and wait for the next fetch."""

        self.records = []
        self.phase = LoadPhase.LOADING
        self.error = None

    def load(self, fetcher: Callable[[], List[Record]]) -> None:
        """Run the fetch collaborator once and replace the snapshot with its result.

        Any exception raised by the fetcher is treated the same way: it is
        logged for diagnostics and the store moves to ``fetch_failed`` with the
        fixed user-facing message. There is no retry.
        """

        try:
            fetched = list(fetcher())
        except Exception:
            logger.exception("Failed to fetch records")
            self.records = []
            self.phase = LoadPhase.FETCH_FAILED
            self.error = FETCH_ERROR_MESSAGE
            return

        self.records = fetched
        self.phase = LoadPhase.READY
        self.error = None
        logger.info("Record store ready with %d records", len(fetched))
