"""Keyword cleanup and synthesis."""

from typing import Iterable, List, Optional

from ..config import MIN_KEYWORD_LENGTH, STOPWORDS


def clean_keywords(keywords: Iterable[str], limit: int = 10) -> List[str]:
    """
    Drop stopwords and duplicates, keeping first-seen order, and cap the list.

    Duplicates are detected case-insensitively; the first spelling is kept.
    """
    if limit <= 0:
        return []

    seen = set()
    cleaned = []
    for keyword in keywords:
        key = keyword.strip().lower()
        if not key or key in STOPWORDS or key in seen:
            continue
        seen.add(key)
        cleaned.append(keyword.strip())
        if len(cleaned) >= limit:
            break
    return cleaned


def synthesize_keywords(
    title: Optional[str],
    description: Optional[str],
    limit: int = 10
) -> List[str]:
    """Build keywords from title and description words when the page has no meta keywords."""
    text = f"{title or ''} {description or ''}".lower()
    words = [word for word in text.split() if len(word) >= MIN_KEYWORD_LENGTH]
    return clean_keywords(words, limit)
