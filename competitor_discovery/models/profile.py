"""Site profile built from a homepage fetch."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config import DEFAULT_INDUSTRY


class ProfileSource(str, Enum):
    """How the profile's industry was determined."""
    CONTENT = "content"
    DOMAIN_HEURISTIC = "domain_heuristic"


@dataclass
class SiteProfile:
    """What we know about a site after one homepage fetch."""
    domain: str
    title: Optional[str] = None
    description: Optional[str] = None
    industry: str = DEFAULT_INDUSTRY
    keywords: List[str] = field(default_factory=list)
    source: ProfileSource = ProfileSource.CONTENT
    fetch_error: Optional[str] = None

    @property
    def is_degraded(self) -> bool:
        return self.source == ProfileSource.DOMAIN_HEURISTIC

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "domain": self.domain,
            "title": self.title,
            "description": self.description,
            "industry": self.industry,
            "keywords": list(self.keywords),
            "source": self.source.value,
            "fetch_error": self.fetch_error,
        }
