"""Competitor discovery: profile a site, then look up its likely competitors."""

import asyncio
from typing import Any, Dict, List, Optional, Sequence
import logging

from ..config import Settings, get_settings
from ..models.discovery import DiscoveryResult, DiscoveryStatus
from ..models.profile import SiteProfile
from ..models.competitor import CompetitorLookupResult
from .competitor_lookup import CompetitorLookup
from .site_profiler import SiteProfiler

logger = logging.getLogger(__name__)


class CompetitorDiscoveryService:
    """
    Suggests competitors for a website.

    Runs profile -> classify -> lookup. Every stage degrades rather than
    failing; an unexpected error anywhere yields a FAILED result with no
    competitors, which callers present as "add a competitor manually".
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        profiler: Optional[SiteProfiler] = None,
        lookup: Optional[CompetitorLookup] = None
    ):
        self.settings = get_settings(settings)
        self.profiler = profiler or SiteProfiler(self.settings)
        self.lookup = lookup or CompetitorLookup()

    @staticmethod
    def _status_for(profile: SiteProfile, found: CompetitorLookupResult) -> DiscoveryStatus:
        if profile.is_degraded or found.is_fallback:
            return DiscoveryStatus.DEGRADED
        return DiscoveryStatus.COMPLETE

    async def discover(self, domain: str) -> DiscoveryResult:
        """Discover competitors for a domain, tagged with how confident the result is."""
        logger.info(f"Discovering competitors for: {domain}")

        try:
            profile = await self.profiler.profile(domain)
            found = self.lookup.find(profile.industry, profile.domain, profile.title)
        except Exception as e:
            logger.exception(f"Error discovering competitors for {domain}")
            return DiscoveryResult(
                domain=domain if isinstance(domain, str) else repr(domain),
                status=DiscoveryStatus.FAILED,
                error=f"{type(e).__name__}: {e}",
            )

        result = DiscoveryResult(
            domain=profile.domain,
            competitors=found.competitors,
            profile=profile,
            lookup_source=found.source,
            status=self._status_for(profile, found),
        )
        logger.info(
            f"Found {len(result.competitors)} competitors for {result.domain} "
            f"(industry={profile.industry}, profile={profile.source.value}, "
            f"lookup={found.source.value}, status={result.status.value})"
        )
        return result

    async def discover_competitors(self, domain: str) -> List[Dict[str, Any]]:
        """
        Public entry point: competitor suggestions for a domain.

        Returns a list of ``{domain, name, description?, similarity?}``
        dictionaries. Never raises; an empty list means discovery failed
        and the user can still add competitors manually.
        """
        result = await self.discover(domain)
        return result.competitor_dicts()

    async def discover_many(self, domains: Sequence[str]) -> List[DiscoveryResult]:
        """Discover competitors for several domains concurrently, preserving input order."""
        return list(await asyncio.gather(*(self.discover(domain) for domain in domains)))


async def discover_competitors(domain: str, settings: Optional[Settings] = None) -> List[Dict[str, Any]]:
    """Convenience wrapper around CompetitorDiscoveryService.discover_competitors."""
    return await CompetitorDiscoveryService(settings).discover_competitors(domain)
