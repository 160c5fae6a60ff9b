"""Search, severity, and interaction state for the review table."""
from datareview.review.filtering import filter_records, matches_query
from datareview.review.interaction import DismissTarget, InteractionState, PointerPosition
from datareview.review.session import ReviewSession
from datareview.review.severity import SeverityTier, severity_tier
from datareview.review.store import FETCH_ERROR_MESSAGE, LoadPhase, RecordStore

__all__ = [
    "DismissTarget",
    "FETCH_ERROR_MESSAGE",
    "InteractionState",
    "LoadPhase",
    "PointerPosition",
    "RecordStore",
    "ReviewSession",
    "SeverityTier",
    "filter_records",
    "matches_query",
    "severity_tier",
]
