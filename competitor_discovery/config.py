"""Configuration management using environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Fetching
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; AEOBot/1.0; +https://aeo.live)",
        alias="USER_AGENT"
    )
    fetch_timeout_seconds: float = Field(
        default=10.0,
        alias="FETCH_TIMEOUT_SECONDS"
    )

    # Profiling
    body_excerpt_chars: int = Field(
        default=2000,
        alias="BODY_EXCERPT_CHARS"
    )
    max_keywords: int = Field(
        default=10,
        alias="MAX_KEYWORDS"
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        populate_by_name = True


def get_settings(settings: Optional[Settings] = None) -> Settings:
    """Get application settings."""
    return settings or Settings()


DEFAULT_INDUSTRY = "General Business"

# Words dropped when synthesizing keywords from page text
STOPWORDS = frozenset({
    "about", "their", "there", "these", "those", "would",
    "could", "should", "which", "where", "while",
})

# Only words longer than this are kept when synthesizing keywords
MIN_KEYWORD_LENGTH = 5

# TLDs stripped from the domain when it has to stand in for keywords
STRIPPED_TLDS = ("com", "net", "org", "io", "co")

# Location hints, checked in order against the domain and page title
LOCATION_PATTERNS = [
    "coastal", "carolina", "texas", "florida", "california",
    "new-york", "chicago", "atlanta", "denver", "seattle",
    "holy-city", "charleston", "myrtle", "columbia",
]

# Domain-only classification used when the homepage can't be fetched.
# First rule with a matching substring wins.
DOMAIN_INDUSTRY_RULES = [
    (("hvac", "heating", "cooling", "air"), "HVAC & Home Services"),
    (("law", "legal", "attorney"), "Legal Services"),
    (("health", "dental", "medical"), "Healthcare"),
    (("real", "property", "home"), "Real Estate"),
    (("shop", "store", "buy"), "Retail & E-commerce"),
    (("tech", "soft", "app"), "Technology & SaaS"),
]
