"""Competitor lookup from the static catalog."""

import re
from typing import List, Mapping, Optional, Sequence, Tuple
import logging

from ..catalog.competitors import GENERIC_FALLBACK, INDUSTRY_COMPETITORS, REGIONAL_OVERRIDES
from ..config import LOCATION_PATTERNS
from ..models.competitor import (
    CompetitorLookupResult,
    CompetitorRecord,
    LookupSource,
    RegionalOverride,
)

logger = logging.getLogger(__name__)


class CompetitorLookup:
    """
    Maps a classified industry to a list of known competitors.

    Industries with a regional override (currently HVAC) get a
    location-aware list; other industries use their curated list, and
    anything uncurated gets a low-confidence generic fallback.
    """

    def __init__(
        self,
        competitors: Optional[Mapping[str, Sequence[CompetitorRecord]]] = None,
        regional_overrides: Optional[Mapping[str, RegionalOverride]] = None,
        fallback: Optional[Sequence[CompetitorRecord]] = None,
        location_patterns: Optional[Sequence[str]] = None
    ):
        self.competitors = INDUSTRY_COMPETITORS if competitors is None else competitors
        self.regional_overrides = REGIONAL_OVERRIDES if regional_overrides is None else regional_overrides
        self.fallback: Tuple[CompetitorRecord, ...] = tuple(
            GENERIC_FALLBACK if fallback is None else fallback
        )
        self._location_patterns = [
            (pattern, re.compile(re.escape(pattern), re.IGNORECASE))
            for pattern in (LOCATION_PATTERNS if location_patterns is None else location_patterns)
        ]

    def extract_location(self, domain: str, title: Optional[str] = None) -> str:
        """First location pattern found in the domain or title, or an empty string."""
        domain = (domain or "").lower()
        title = title or ""
        for literal, pattern in self._location_patterns:
            if pattern.search(domain) or pattern.search(title):
                return literal
        return ""

    def find(
        self,
        industry: str,
        domain: str,
        title: Optional[str] = None
    ) -> CompetitorLookupResult:
        """Competitors for an industry, refined by any location hint in the domain/title."""
        location = self.extract_location(domain, title)

        override = self.regional_overrides.get(industry)
        if override is not None:
            competitors, source = override.resolve(location)
            logger.info(
                f"Found {len(competitors)} {source.value} competitors for {industry} "
                f"(location: {location or 'none'})"
            )
            return CompetitorLookupResult(competitors, source, location)

        curated = self.competitors.get(industry)
        if curated:
            logger.info(f"Found {len(curated)} competitors for {industry}")
            return CompetitorLookupResult(list(curated), LookupSource.CURATED, location)

        logger.info(f"No specific competitors for {industry}, using fallback")
        return CompetitorLookupResult(list(self.fallback), LookupSource.GENERIC, location)

    def lookup(
        self,
        industry: str,
        domain: str,
        title: Optional[str] = None
    ) -> List[CompetitorRecord]:
        """Just the competitor list from find()."""
        return self.find(industry, domain, title).competitors
