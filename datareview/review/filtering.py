"""Free-text search over the scalar attributes of records."""
from typing import Iterable, List

from datareview.core.models import Record, field_text


def matches_query(record: Record, query: str) -> bool:
    needle = query.lower()
    return any(needle in field_text(value).lower() for value in record.scalar_values())


def filter_records(records: Iterable[Record], query: str) -> List[Record]:
    """Return the records matching ``query``, preserving their original order.

    Findings are not searched. An empty query matches every record.
    """

    return [record for record in records if matches_query(record, query)]
