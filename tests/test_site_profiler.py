"""Tests for the site profiler."""

import asyncio

import httpx
import pytest

from competitor_discovery.config import Settings
from competitor_discovery.models.profile import ProfileSource
from competitor_discovery.services.site_profiler import SiteProfiler

from .helpers import build_page, failing_transport, html_transport


class TestSiteProfiler:
    """Test suite for SiteProfiler with a mocked homepage."""

    @pytest.mark.asyncio
    async def test_profile_from_homepage(self, settings, hvac_charleston_page):
        profiler = SiteProfiler(settings, transport=html_transport(hvac_charleston_page))

        profile = await profiler.profile("charlestonhomeservices.com")

        assert profile.domain == "charlestonhomeservices.com"
        assert profile.title == "Charleston Heating & Air | HVAC Repair"
        assert profile.description == "Heating and cooling services in Charleston"
        assert profile.industry == "HVAC & Home Services"
        assert profile.source == ProfileSource.CONTENT
        assert not profile.is_degraded

    @pytest.mark.asyncio
    async def test_request_uses_https_and_user_agent(self, settings):
        seen = []
        profiler = SiteProfiler(settings, transport=html_transport(build_page(title="x"), seen=seen))

        await profiler.profile("example.com")

        assert len(seen) == 1
        assert seen[0].url.scheme == "https"
        assert seen[0].url.host == "example.com"
        assert seen[0].headers["User-Agent"] == "Mozilla/5.0 (compatible; AEOBot/1.0; +https://aeo.live)"

    @pytest.mark.asyncio
    async def test_scheme_is_kept_and_stripped_from_domain(self, settings):
        seen = []
        profiler = SiteProfiler(settings, transport=html_transport(build_page(title="x"), seen=seen))

        profile = await profiler.profile("http://example.com/")

        assert seen[0].url.scheme == "http"
        assert profile.domain == "example.com"

    @pytest.mark.asyncio
    async def test_meta_keywords_preferred(self, settings):
        page = build_page(
            title="Acme Roofing Company",
            keywords="roof repair, gutters, shingles",
        )
        profiler = SiteProfiler(settings, transport=html_transport(page))

        profile = await profiler.profile("acmeroofing.com")

        assert profile.keywords == ["roof repair", "gutters", "shingles"]

    @pytest.mark.asyncio
    async def test_keywords_synthesized_without_meta(self, settings):
        page = build_page(
            title="Acme Roofing Company",
            description="Roofing repairs which homeowners trust roofing",
        )
        profiler = SiteProfiler(settings, transport=html_transport(page))

        profile = await profiler.profile("acmeroofing.com")

        # Short words, stopwords and duplicates are dropped
        assert profile.keywords == ["roofing", "company", "repairs", "homeowners", "trust"]

    @pytest.mark.asyncio
    async def test_keyword_cap_on_long_meta_tag(self, settings):
        terms = [f"service term {i}" for i in range(18)] + ["service term 3", "about"]
        page = build_page(title="Acme", keywords=", ".join(terms))
        profiler = SiteProfiler(settings, transport=html_transport(page))

        profile = await profiler.profile("acme.com")

        assert len(profile.keywords) <= 10
        assert len(profile.keywords) == len(set(profile.keywords))
        assert "about" not in profile.keywords

    @pytest.mark.asyncio
    async def test_description_content_first(self, settings):
        page = build_page(title="Acme", description="Termite inspections", description_first=True)
        profiler = SiteProfiler(settings, transport=html_transport(page))

        profile = await profiler.profile("acme.com")

        assert profile.description == "Termite inspections"
        assert profile.industry == "Pest Control"

    @pytest.mark.asyncio
    async def test_page_without_metadata(self, settings):
        profiler = SiteProfiler(settings, transport=html_transport("<html><body></body></html>"))

        profile = await profiler.profile("example.com")

        assert profile.title is None
        assert profile.description is None
        assert profile.industry == "General Business"
        assert profile.keywords == []
        assert profile.source == ProfileSource.CONTENT


class TestDegradedProfile:
    """Fetch failures fall back to the domain heuristic."""

    @pytest.mark.asyncio
    async def test_connection_error(self, settings):
        profiler = SiteProfiler(settings, transport=failing_transport())

        profile = await profiler.profile("acmehvacrepair.com")

        assert profile.source == ProfileSource.DOMAIN_HEURISTIC
        assert profile.is_degraded
        assert profile.industry == "HVAC & Home Services"
        assert profile.keywords == ["acmehvacrepair"]
        assert profile.title is None
        assert profile.description is None
        assert "ConnectError" in profile.fetch_error

    @pytest.mark.asyncio
    async def test_non_2xx_status(self, settings):
        profiler = SiteProfiler(settings, transport=html_transport("<title>Law Firm</title>", status_code=503))

        profile = await profiler.profile("smithlegal.net")

        assert profile.is_degraded
        assert profile.industry == "Legal Services"
        assert profile.keywords == ["smithlegal"]
        assert profile.fetch_error == "HTTP 503"

    @pytest.mark.asyncio
    async def test_timeout(self):
        async def slow_handler(request):
            await asyncio.sleep(5)
            return httpx.Response(200, text="<title>Too late</title>")

        profiler = SiteProfiler(
            Settings(FETCH_TIMEOUT_SECONDS=0.05),
            transport=httpx.MockTransport(slow_handler),
        )

        profile = await profiler.profile("slowsite.org")

        assert profile.is_degraded
        assert profile.industry == "General Business"
        assert profile.keywords == ["slowsite"]
        assert "timed out" in profile.fetch_error

    @pytest.mark.asyncio
    @pytest.mark.parametrize("domain", ["", "   ", "http://", "not a domain", "https://[bad"])
    async def test_malformed_input_never_raises(self, settings, domain):
        profiler = SiteProfiler(settings, transport=failing_transport())

        profile = await profiler.profile(domain)

        assert profile.industry
        assert len(profile.keywords) <= 10

    def test_degraded_profile_strips_tld(self):
        profiler = SiteProfiler(Settings())
        assert profiler.degraded_profile("shopnow.io").keywords == ["shopnow"]
        assert profiler.degraded_profile("shopnow.co.uk").keywords == ["shopnow.co.uk"]
