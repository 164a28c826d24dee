"""Competitor discovery and industry classification for website reports."""

from .services.discovery import CompetitorDiscoveryService, discover_competitors

__version__ = "0.1.0"

__all__ = ["CompetitorDiscoveryService", "discover_competitors", "__version__"]
