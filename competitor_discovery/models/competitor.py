"""Competitor records and lookup results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class LookupSource(str, Enum):
    """Where a competitor list came from."""
    REGIONAL = "regional"
    NATIONAL = "national"
    CURATED = "curated"
    GENERIC = "generic"


@dataclass(frozen=True)
class CompetitorRecord:
    """A suggested competitor."""
    domain: str
    name: str
    description: Optional[str] = None
    similarity: Optional[float] = None

    def __post_init__(self):
        if self.similarity is not None and not 0.0 <= self.similarity <= 1.0:
            raise ValueError(
                f"Similarity for {self.domain} must be within [0, 1], got {self.similarity}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the public response shape, omitting absent fields."""
        data: Dict[str, Any] = {"domain": self.domain, "name": self.name}
        if self.description is not None:
            data["description"] = self.description
        if self.similarity is not None:
            data["similarity"] = self.similarity
        return data


@dataclass(frozen=True)
class RegionalList:
    """Competitors served instead of the national list when a location hint matches."""
    hints: Tuple[str, ...]
    competitors: Tuple[CompetitorRecord, ...]
    # How many national competitors to append after the regional ones
    national_tail: int = 1

    def matches(self, location: str) -> bool:
        location = location.lower()
        return bool(location) and any(hint in location for hint in self.hints)


@dataclass(frozen=True)
class RegionalOverride:
    """Location-aware competitor lists for one industry."""
    national: Tuple[CompetitorRecord, ...]
    regions: Tuple[RegionalList, ...] = ()

    def resolve(self, location: str) -> Tuple[List[CompetitorRecord], LookupSource]:
        for region in self.regions:
            if region.matches(location):
                tail = list(self.national[:region.national_tail])
                return list(region.competitors) + tail, LookupSource.REGIONAL
        return list(self.national), LookupSource.NATIONAL


@dataclass
class CompetitorLookupResult:
    """Competitors found for an industry, and how they were chosen."""
    competitors: List[CompetitorRecord] = field(default_factory=list)
    source: LookupSource = LookupSource.GENERIC
    location: str = ""

    @property
    def is_fallback(self) -> bool:
        return self.source == LookupSource.GENERIC
