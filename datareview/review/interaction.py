"""Detail-view and tooltip state for the review table."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from datareview.core.models import Record


@dataclass(frozen=True)
class PointerPosition:
    x: float
    y: float


class DismissTarget(str, Enum):
    """Where a click landed while the detail view was open."""

    SCRIM = "scrim"
    CONTENT = "content"
    CLOSE_BUTTON = "close_button"


@dataclass
class InteractionState:
    """Which record's detail is open and which field message is hovered.

    The hover message and pointer position are always set and cleared
    together.
    """

    active_detail_record: Optional[Record] = None
    hovered_field_message: Optional[str] = None
    pointer_position: Optional[PointerPosition] = None

    def open_detail(self, record: Record) -> None:
        self.active_detail_record = record

    def close_detail(self) -> None:
        self.active_detail_record = None

    def dismiss_detail(self, target: DismissTarget) -> bool:
        """Close the detail view unless the click landed on its content.

        Returns whether the view was closed.
        """

        if target is DismissTarget.CONTENT:
            return False
        self.close_detail()
        return True

    def hover_field(self, message: str, position: PointerPosition) -> None:
        if not message or position is None:
            raise ValueError("hover requires both a message and a pointer position")
        self.hovered_field_message = message
        self.pointer_position = position

    def unhover_field(self) -> None:
        self.hovered_field_message = None
        self.pointer_position = None

    @property
    def tooltip(self) -> Optional[Tuple[str, PointerPosition]]:
        if self.hovered_field_message is None:
            return None
        return self.hovered_field_message, self.pointer_position
