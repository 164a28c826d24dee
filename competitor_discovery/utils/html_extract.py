"""
Regex-based metadata extraction from raw HTML.

Deliberately avoids a DOM parser: only the title, two meta tags and a
short visible-text excerpt are needed, and malformed markup simply
yields missing fields.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Sequence

TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
BODY_RE = re.compile(r"<body[^>]*>([\s\S]*?)</body>", re.IGNORECASE)
SCRIPT_RE = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
STYLE_RE = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)
TAG_RE = re.compile(r"<[^>]+>")
WHITESPACE_RE = re.compile(r"\s+")


def _meta_patterns(name: str) -> List[Pattern]:
    """Patterns for a named meta tag with name-first or content-first attributes."""
    return [
        re.compile(
            rf"""<meta[^>]*name=["']{name}["'][^>]*content=["']([^"']+)["']""",
            re.IGNORECASE,
        ),
        re.compile(
            rf"""<meta[^>]*content=["']([^"']+)["'][^>]*name=["']{name}["']""",
            re.IGNORECASE,
        ),
    ]


DESCRIPTION_RES = _meta_patterns("description")
KEYWORDS_RES = _meta_patterns("keywords")


@dataclass
class PageMetadata:
    """Fields pulled out of a homepage."""
    title: Optional[str] = None
    description: Optional[str] = None
    meta_keywords: List[str] = field(default_factory=list)
    body_text: str = ""


def _first_match(patterns: Sequence[Pattern], html: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(html)
        if match:
            return match.group(1)
    return None


def extract_title(html: str) -> Optional[str]:
    match = TITLE_RE.search(html)
    if not match:
        return None
    return match.group(1).strip() or None


def extract_description(html: str) -> Optional[str]:
    description = _first_match(DESCRIPTION_RES, html)
    if description is None:
        return None
    return description.strip() or None


def extract_meta_keywords(html: str) -> List[str]:
    """Comma-separated meta keywords, trimmed, empties dropped."""
    raw = _first_match(KEYWORDS_RES, html) or ""
    return [keyword.strip() for keyword in raw.split(",") if keyword.strip()]


def extract_body_text(html: str, max_chars: int = 2000) -> str:
    """Visible text of the <body>, scripts and styles removed, whitespace collapsed."""
    match = BODY_RE.search(html)
    if not match:
        return ""

    text = SCRIPT_RE.sub("", match.group(1))
    text = STYLE_RE.sub("", text)
    text = TAG_RE.sub(" ", text)
    text = WHITESPACE_RE.sub(" ", text)
    return text[:max_chars]


def extract_metadata(html: str, max_body_chars: int = 2000) -> PageMetadata:
    """Extract everything the profiler needs from a page in one pass."""
    return PageMetadata(
        title=extract_title(html),
        description=extract_description(html),
        meta_keywords=extract_meta_keywords(html),
        body_text=extract_body_text(html, max_body_chars),
    )
