"""Industry classification by weighted keyword scoring."""

from typing import List, Optional, Sequence, Tuple
import logging

from ..catalog.industries import INDUSTRIES
from ..config import DEFAULT_INDUSTRY, DOMAIN_INDUSTRY_RULES
from ..models.industry import IndustryDefinition, IndustryMatch

logger = logging.getLogger(__name__)


class IndustryClassifier:
    """
    Service for classifying a site into an industry.

    Every keyword found in the page text adds ``weight * len(keyword) / 5``
    to its industry, so longer, more specific phrases count for more and
    high-priority verticals outscore incidental generic matches. On a tie
    the industry declared first in the table wins.
    """

    # Keyword length is divided by this before weighting
    LENGTH_DIVISOR = 5

    def __init__(self, industries: Optional[Sequence[IndustryDefinition]] = None):
        self.industries: Tuple[IndustryDefinition, ...] = tuple(
            INDUSTRIES if industries is None else industries
        )

    @staticmethod
    def _build_haystack(*parts: Optional[str]) -> str:
        return " ".join(part or "" for part in parts).lower()

    def _score_industry(self, haystack: str, industry: IndustryDefinition) -> Tuple[float, List[str]]:
        """
        Score how well text matches an industry.

        Returns (score, matched_keywords)
        """
        score = 0.0
        matched = []
        for keyword in industry.keywords:
            if keyword in haystack:
                score += industry.weight * (len(keyword) / self.LENGTH_DIVISOR)
                matched.append(keyword)
        return score, matched

    def score(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        body_text: Optional[str] = None,
        domain: Optional[str] = None
    ) -> List[IndustryMatch]:
        """All industries with a non-zero score, best first (table order breaks ties)."""
        haystack = self._build_haystack(title, description, body_text, domain)
        if not haystack.strip():
            return []

        matches = []
        for industry in self.industries:
            score, matched = self._score_industry(haystack, industry)
            if score > 0:
                matches.append(IndustryMatch(industry.name, score, tuple(matched)))

        # sorted() is stable, so equal scores keep declaration order
        return sorted(matches, key=lambda match: match.score, reverse=True)

    def best_match(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        body_text: Optional[str] = None,
        domain: Optional[str] = None
    ) -> Optional[IndustryMatch]:
        """Highest scoring industry, or None when no keyword matched."""
        haystack = self._build_haystack(title, description, body_text, domain)

        best: Optional[IndustryMatch] = None
        best_score = 0.0
        for industry in self.industries:
            score, matched = self._score_industry(haystack, industry)
            if score > best_score:
                best_score = score
                best = IndustryMatch(industry.name, score, tuple(matched))
        return best

    def classify(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        body_text: Optional[str] = None,
        domain: Optional[str] = None
    ) -> str:
        """
        Classify page content into an industry name.

        Always returns a non-empty name; DEFAULT_INDUSTRY when nothing matched.
        """
        match = self.best_match(title, description, body_text, domain)
        if match is None:
            logger.info(f"No industry keywords matched for {domain or 'site'}, using {DEFAULT_INDUSTRY}")
            return DEFAULT_INDUSTRY

        logger.info(
            f"Industry detected for {domain or 'site'}: {match.name} "
            f"(score: {match.score:.1f}, keywords={list(match.matched_keywords)})"
        )
        return match.name

    @staticmethod
    def classify_domain(domain: str) -> str:
        """Guess the industry from the domain name alone."""
        domain_lower = (domain or "").lower()
        for fragments, industry in DOMAIN_INDUSTRY_RULES:
            if any(fragment in domain_lower for fragment in fragments):
                return industry
        return DEFAULT_INDUSTRY
