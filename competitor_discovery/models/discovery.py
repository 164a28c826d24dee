"""Tagged outcome of a discovery run."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .competitor import CompetitorRecord, LookupSource
from .profile import SiteProfile


class DiscoveryStatus(str, Enum):
    """Confidence of a discovery run."""
    COMPLETE = "complete"
    DEGRADED = "degraded"
    FAILED = "failed"


@dataclass
class DiscoveryResult:
    """Result of discovering competitors for one domain."""
    domain: str
    competitors: List[CompetitorRecord] = field(default_factory=list)
    profile: Optional[SiteProfile] = None
    lookup_source: Optional[LookupSource] = None
    status: DiscoveryStatus = DiscoveryStatus.COMPLETE
    error: Optional[str] = None

    @property
    def industry(self) -> Optional[str]:
        return self.profile.industry if self.profile else None

    def competitor_dicts(self) -> List[Dict[str, Any]]:
        return [competitor.to_dict() for competitor in self.competitors]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "domain": self.domain,
            "status": self.status.value,
            "industry": self.industry,
            "lookup_source": self.lookup_source.value if self.lookup_source else None,
            "profile": self.profile.to_dict() if self.profile else None,
            "competitors": self.competitor_dicts(),
            "error": self.error,
        }
