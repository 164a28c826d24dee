"""Data models for competitor discovery."""

from .industry import IndustryDefinition, IndustryMatch
from .competitor import CompetitorRecord, CompetitorLookupResult, LookupSource, RegionalOverride, RegionalList
from .profile import SiteProfile, ProfileSource
from .discovery import DiscoveryResult, DiscoveryStatus

__all__ = [
    "IndustryDefinition",
    "IndustryMatch",
    "CompetitorRecord",
    "CompetitorLookupResult",
    "LookupSource",
    "RegionalOverride",
    "RegionalList",
    "SiteProfile",
    "ProfileSource",
    "DiscoveryResult",
    "DiscoveryStatus",
]
