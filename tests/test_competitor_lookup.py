"""Tests for competitor lookup."""

import pytest

from competitor_discovery.catalog.competitors import (
    GENERIC_FALLBACK,
    INDUSTRY_COMPETITORS,
    REGIONAL_OVERRIDES,
)
from competitor_discovery.catalog.industries import industry_names
from competitor_discovery.models.competitor import CompetitorRecord, LookupSource
from competitor_discovery.services.competitor_lookup import CompetitorLookup

CHARLESTON_DOMAINS = ["charlestonhvac.com", "carolinacomfort.com", "lowcountryhvac.com"]
NATIONAL_HVAC_DOMAINS = ["onehourheatandair.com", "aaborig.com", "mrrooter.com"]


class TestLocationExtraction:
    """Location hints come from the domain and title."""

    @pytest.fixture
    def lookup(self):
        return CompetitorLookup()

    def test_location_from_domain(self, lookup):
        assert lookup.extract_location("denverroofing.com") == "denver"

    def test_location_from_title(self, lookup):
        assert lookup.extract_location("acmeroofing.com", "Roofing in Seattle, WA") == "seattle"

    def test_hyphenated_patterns(self, lookup):
        assert lookup.extract_location("new-york-plumbers.com") == "new-york"
        assert lookup.extract_location("holy-city-hvac.com") == "holy-city"

    def test_first_pattern_wins(self, lookup):
        # "carolina" is declared before "charleston"
        assert lookup.extract_location("charleston-carolina.com") == "carolina"

    def test_no_location(self, lookup):
        assert lookup.extract_location("acmehvacrepair.com") == ""
        assert lookup.extract_location("", None) == ""


class TestCompetitorLookup:
    """Test suite for CompetitorLookup."""

    @pytest.fixture
    def lookup(self):
        return CompetitorLookup()

    def test_hvac_national_without_location(self, lookup):
        result = lookup.find("HVAC & Home Services", "acmehvacrepair.com")

        assert [c.domain for c in result.competitors] == NATIONAL_HVAC_DOMAINS
        assert result.source == LookupSource.NATIONAL
        assert result.location == ""

    def test_hvac_charleston_region(self, lookup):
        result = lookup.find("HVAC & Home Services", "charlestonhomeservices.com", "Charleston Heating & Air")

        domains = [c.domain for c in result.competitors]
        assert domains[:3] == CHARLESTON_DOMAINS
        assert domains[3:] == NATIONAL_HVAC_DOMAINS[:1]
        assert result.source == LookupSource.REGIONAL
        assert result.location == "charleston"

    @pytest.mark.parametrize("domain", ["coastalair.com", "carolinaheat.com"])
    def test_hvac_other_regional_hints(self, lookup, domain):
        result = lookup.find("HVAC & Home Services", domain)
        assert result.source == LookupSource.REGIONAL
        assert len(result.competitors) == 4

    def test_hvac_location_outside_region(self, lookup):
        result = lookup.find("HVAC & Home Services", "denverheating.com")

        assert result.location == "denver"
        assert result.source == LookupSource.NATIONAL
        assert [c.domain for c in result.competitors] == NATIONAL_HVAC_DOMAINS

    def test_curated_industry(self, lookup):
        result = lookup.find("Pest Control", "bugbusters.com")

        assert result.source == LookupSource.CURATED
        assert [c.name for c in result.competitors] == ["Orkin", "Terminix", "Aptive Environmental", "Rentokil"]

    def test_curated_ignores_location(self, lookup):
        result = lookup.find("Plumbing", "charlestonplumbing.com")

        assert result.source == LookupSource.CURATED
        assert result.location == "charleston"
        assert result.competitors[0].domain == "mrrooter.com"

    def test_unknown_industry_uses_generic_fallback(self, lookup):
        # Photography is classified but has no curated competitors
        result = lookup.find("Photography", "janedoephoto.com")

        assert result.source == LookupSource.GENERIC
        assert result.is_fallback
        assert len(result.competitors) == 2
        assert sorted(c.similarity for c in result.competitors) == [0.55, 0.60]

    def test_general_business_uses_generic_fallback(self, lookup):
        result = lookup.find("General Business", "example.com")
        assert list(result.competitors) == list(GENERIC_FALLBACK)

    def test_returned_list_is_a_copy(self, lookup):
        first = lookup.find("Roofing", "example.com")
        first.competitors.clear()

        second = lookup.find("Roofing", "example.com")
        assert len(second.competitors) == 3

    def test_lookup_returns_plain_list(self, lookup):
        competitors = lookup.lookup("HVAC & Home Services", "acmehvacrepair.com")

        assert isinstance(competitors, list)
        assert [c.domain for c in competitors] == NATIONAL_HVAC_DOMAINS

    def test_custom_tables(self):
        custom = CompetitorLookup(
            competitors={"Widgets": [CompetitorRecord("widgets.example", "Widget Co", similarity=0.9)]},
            regional_overrides={},
            fallback=[CompetitorRecord("fallback.example", "Fallback")],
        )

        assert custom.find("Widgets", "x.com").competitors[0].name == "Widget Co"
        assert custom.find("HVAC & Home Services", "x.com").competitors[0].name == "Fallback"


class TestCompetitorCatalog:
    """Invariants of the static competitor tables."""

    def _all_records(self):
        for records in INDUSTRY_COMPETITORS.values():
            yield from records
        for override in REGIONAL_OVERRIDES.values():
            yield from override.national
            for region in override.regions:
                yield from region.competitors
        yield from GENERIC_FALLBACK

    def test_curated_industries_are_classifiable(self):
        names = set(industry_names())
        for industry in list(INDUSTRY_COMPETITORS) + list(REGIONAL_OVERRIDES):
            assert industry in names, industry

    def test_similarity_in_range(self):
        for record in self._all_records():
            assert record.similarity is not None
            assert 0.0 <= record.similarity <= 1.0

    def test_curated_lists_sorted_by_similarity(self):
        for industry, records in INDUSTRY_COMPETITORS.items():
            similarities = [record.similarity for record in records]
            assert similarities == sorted(similarities, reverse=True), industry

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            INDUSTRY_COMPETITORS["New"] = ()

    def test_invalid_similarity_rejected(self):
        with pytest.raises(ValueError):
            CompetitorRecord("bad.example", "Bad", similarity=1.5)

    def test_to_dict_omits_missing_fields(self):
        assert CompetitorRecord("a.com", "A").to_dict() == {"domain": "a.com", "name": "A"}
        assert CompetitorRecord("a.com", "A", "desc", 0.5).to_dict() == {
            "domain": "a.com",
            "name": "A",
            "description": "desc",
            "similarity": 0.5,
        }
