"""Industry definitions and classification matches."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class IndustryDefinition:
    """
    A single industry category in the classifier table.

    Keywords are lowercase substrings; weight is the category priority
    multiplier applied to every keyword that matches.
    """
    name: str
    keywords: Tuple[str, ...]
    weight: float

    def __post_init__(self):
        if not self.name:
            raise ValueError("Industry name must not be empty")
        # Normalize so callers can pass lists or mixed case
        object.__setattr__(self, "keywords", tuple(k.lower() for k in self.keywords))


@dataclass(frozen=True)
class IndustryMatch:
    """Score breakdown for one industry against a piece of text."""
    name: str
    score: float
    matched_keywords: Tuple[str, ...] = ()
