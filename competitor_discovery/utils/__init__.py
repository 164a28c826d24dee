"""Utility modules for competitor discovery."""

from .html_extract import PageMetadata, extract_metadata
from .domain import normalize_domain, to_url, strip_tld
from .keywords import synthesize_keywords, clean_keywords

__all__ = [
    "PageMetadata",
    "extract_metadata",
    "normalize_domain",
    "to_url",
    "strip_tld",
    "synthesize_keywords",
    "clean_keywords",
]
