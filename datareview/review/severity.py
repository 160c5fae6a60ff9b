"""Map optional validation findings to presentation tiers."""
from enum import Enum
from typing import Optional

from datareview.core.models import Finding


class SeverityTier(str, Enum):
    NONE = "none"
    WARNING = "warning"
    CRITICAL = "critical"


def severity_tier(finding: Optional[Finding]) -> SeverityTier:
    """Return the tier for a field; no finding means no known issue."""

    if finding is None:
        return SeverityTier.NONE
    return SeverityTier(finding.severity)
