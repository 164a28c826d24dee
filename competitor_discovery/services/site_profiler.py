"""Site profiler: fetches a homepage and builds a SiteProfile from it."""

import asyncio
from typing import Optional
import logging

import httpx

from ..config import Settings, get_settings
from ..models.profile import SiteProfile, ProfileSource
from ..utils.domain import normalize_domain, strip_tld, to_url
from ..utils.html_extract import extract_metadata
from ..utils.keywords import clean_keywords, synthesize_keywords
from .industry_classifier import IndustryClassifier

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The homepage could not be retrieved."""


class SiteProfiler:
    """
    Service for profiling a website from its homepage.

    One GET per call, no retries. Any failure to fetch falls back to a
    profile classified from the domain name alone, so ``profile`` never
    raises.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        classifier: Optional[IndustryClassifier] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = get_settings(settings)
        self.classifier = classifier or IndustryClassifier()
        # Injected in tests to avoid real network calls
        self._transport = transport

    async def _fetch_html(self, url: str) -> str:
        """Fetch the page, raising FetchError on any failure or timeout."""
        timeout = self.settings.fetch_timeout_seconds
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await asyncio.wait_for(
                    client.get(
                        url,
                        timeout=timeout,
                        follow_redirects=True,
                        headers={
                            "User-Agent": self.settings.user_agent,
                            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                            "Accept-Language": "en-US,en;q=0.5",
                        }
                    ),
                    timeout=timeout,
                )
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise FetchError(f"HTTP {e.response.status_code}") from e
        except asyncio.TimeoutError as e:
            raise FetchError(f"timed out after {timeout:g}s") from e
        except httpx.HTTPError as e:
            raise FetchError(f"{type(e).__name__}: {e}") from e
        except Exception as e:
            # Malformed URLs and the like surface as assorted exception types
            raise FetchError(f"{type(e).__name__}: {e}") from e

    def profile_from_html(self, domain: str, html: str) -> SiteProfile:
        """Build a profile from an already fetched homepage."""
        domain = normalize_domain(domain)
        limit = self.settings.max_keywords
        metadata = extract_metadata(html, self.settings.body_excerpt_chars)

        industry = self.classifier.classify(
            metadata.title,
            metadata.description,
            metadata.body_text,
            domain
        )

        if metadata.meta_keywords:
            keywords = clean_keywords(metadata.meta_keywords, limit)
        else:
            keywords = synthesize_keywords(metadata.title, metadata.description, limit)

        return SiteProfile(
            domain=domain,
            title=metadata.title,
            description=metadata.description,
            industry=industry,
            keywords=keywords,
            source=ProfileSource.CONTENT,
        )

    def degraded_profile(self, domain: str, reason: Optional[str] = None) -> SiteProfile:
        """Profile for a site we couldn't fetch, classified from its name only."""
        domain = normalize_domain(domain)
        fallback_keyword = strip_tld(domain)
        return SiteProfile(
            domain=domain,
            industry=self.classifier.classify_domain(domain),
            keywords=[fallback_keyword] if fallback_keyword else [],
            source=ProfileSource.DOMAIN_HEURISTIC,
            fetch_error=reason,
        )

    async def profile(self, domain: str) -> SiteProfile:
        """Fetch and profile a site. Never raises."""
        url = to_url(domain)

        try:
            html = await self._fetch_html(url)
        except FetchError as e:
            logger.warning(f"Failed to analyze site {domain}: {e}")
            profile = self.degraded_profile(domain, str(e))
            logger.info(f"Using domain heuristic for {profile.domain}: {profile.industry}")
            return profile

        profile = self.profile_from_html(domain, html)
        logger.debug(f"Site analysis for {profile.domain}: {profile.to_dict()}")
        return profile
