"""Services for competitor discovery."""

from .industry_classifier import IndustryClassifier
from .site_profiler import SiteProfiler, FetchError
from .competitor_lookup import CompetitorLookup
from .discovery import CompetitorDiscoveryService, discover_competitors

__all__ = [
    "IndustryClassifier",
    "SiteProfiler",
    "FetchError",
    "CompetitorLookup",
    "CompetitorDiscoveryService",
    "discover_competitors",
]
