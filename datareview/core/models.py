"""Data models for reviewable records and their validation findings."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

WATCHED_FIELDS: Tuple[str, ...] = ("email", "phone", "zipcode", "street")
SCALAR_FIELDS: Tuple[str, ...] = (
    "id",
    "name",
    "email",
    "street",
    "city",
    "zipcode",
    "phone",
    "status",
)
SEVERITIES = ("critical", "warning")
KNOWN_STATUSES = ("active", "inactive", "pending")


@dataclass(frozen=True)
class Finding:
    """A validation outcome attached to exactly one record field."""

    message: str
    severity: str

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("finding message must not be empty")
        if self.severity not in SEVERITIES:
            raise ValueError(f"unknown finding severity: {self.severity!r}")

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Finding":
        return cls(message=payload.get("message", ""), severity=payload.get("severity", ""))


@dataclass
class Record:
    """One reviewable entity with contact fields, status, and per-field findings."""

    id: int
    name: str
    email: str
    status: str
    street: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None
    phone: Optional[str] = None
    errors: Dict[str, Finding] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Record":
        """Build a record from one entry of a fetched ``{"records": [...]}`` payload."""

        raw_errors = payload.get("errors") or {}
        errors = {
            name: Finding.from_dict(raw_errors[name])
            for name in WATCHED_FIELDS
            if raw_errors.get(name)
        }
        return cls(
            id=int(payload["id"]),
            name=payload["name"],
            email=payload["email"],
            status=payload["status"],
            street=payload.get("street"),
            city=payload.get("city"),
            zipcode=payload.get("zipcode"),
            phone=payload.get("phone"),
            errors=errors,
        )

    def finding(self, field_name: str) -> Optional[Finding]:
        """Return the finding for a watched field, or ``None`` when there is no known issue."""

        return self.errors.get(field_name)

    def scalar_values(self) -> List[Any]:
        return [getattr(self, name) for name in SCALAR_FIELDS]


def field_text(value: Any) -> str:
    """Return the canonical text used for display, search, and export.

    Absent optional fields become the empty string.
    """

    if value is None:
        return ""
    return str(value)
