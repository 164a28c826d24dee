"""Static industry and competitor tables."""

from .industries import INDUSTRIES, get_industry, industry_names
from .competitors import (
    INDUSTRY_COMPETITORS,
    REGIONAL_OVERRIDES,
    GENERIC_FALLBACK,
    get_curated_competitors,
)

__all__ = [
    "INDUSTRIES",
    "get_industry",
    "industry_names",
    "INDUSTRY_COMPETITORS",
    "REGIONAL_OVERRIDES",
    "GENERIC_FALLBACK",
    "get_curated_competitors",
]
