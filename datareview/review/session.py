"""Explicit state container tying the record store, query, and interaction state together."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from datareview.core.models import Record
from datareview.export.sinks import ExportArtifact, build_download
from datareview.review.filtering import filter_records
from datareview.review.interaction import DismissTarget, InteractionState, PointerPosition
from datareview.review.store import RecordStore

logger = logging.getLogger(__name__)


class ReviewSession:
    """One review surface: fetched records, the search query, and what the user is pointing at.

    Every method handles a single user event to completion. Derived values such
    as the visible subset are recomputed on access.
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        interaction: Optional[InteractionState] = None,
    ) -> None:
        self.store = store or RecordStore()
        self.interaction = interaction or InteractionState()
        self.query = ""

    def load(self, fetcher: Callable[[], List[Record]]) -> None:
        """Fetch a new snapshot and point an open detail view at the replacement record."""

        self.store.load(fetcher)
        opened = self.interaction.active_detail_record
        if opened is None:
            return
        replacement = self.find_record(opened.id)
        if replacement is None:
            logger.info("Record %s is gone after reload; closing its detail view", opened.id)
            self.interaction.close_detail()
        else:
            self.interaction.open_detail(replacement)

    def reload(self, fetcher: Callable[[], List[Record]]) -> None:
        """Drop the current snapshot and fetch again, keeping the query and interaction state."""

        self.store.reset()
        self.load(fetcher)

    def search(self, query: str) -> None:
        self.query = query

    @property
    def visible_records(self) -> List[Record]:
        if not self.store.is_ready:
            return []
        return filter_records(self.store.records, self.query)

    def find_record(self, record_id: int) -> Optional[Record]:
        return next((record for record in self.store.records if record.id == record_id), None)

    def open_detail(self, record_id: int) -> bool:
        record = self.find_record(record_id)
        if record is None:
            logger.warning("No record with id %s to open", record_id)
            return False
        self.interaction.open_detail(record)
        return True

    def close_detail(self) -> None:
        self.interaction.close_detail()

    def click_detail(self, target: DismissTarget) -> bool:
        return self.interaction.dismiss_detail(target)

    def pointer_move(self, record_id: int, field_name: str, x: float, y: float) -> None:
        """Show the hovered field's finding, or clear the tooltip when it has none."""

        record = self.find_record(record_id)
        finding = record.finding(field_name) if record else None
        if finding is None:
            self.interaction.unhover_field()
            return
        self.interaction.hover_field(finding.message, PointerPosition(x, y))

    def pointer_leave(self) -> None:
        self.interaction.unhover_field()

    def export(self) -> ExportArtifact:
        return build_download(self.visible_records)
