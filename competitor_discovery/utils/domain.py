"""Domain and URL helpers."""

import re

from ..config import STRIPPED_TLDS

SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
TLD_RE = re.compile(r"\.(%s)$" % "|".join(STRIPPED_TLDS))


def to_url(domain: str) -> str:
    """Absolute URL for a domain; anything already starting with http is kept as is."""
    domain = domain.strip()
    if domain.startswith("http"):
        return domain
    return f"https://{domain}"


def normalize_domain(domain: str) -> str:
    """Domain without scheme or trailing slash."""
    return SCHEME_RE.sub("", domain.strip()).rstrip("/")


def strip_tld(domain: str) -> str:
    """Drop a common TLD so the domain can stand in as a keyword."""
    return TLD_RE.sub("", domain)
