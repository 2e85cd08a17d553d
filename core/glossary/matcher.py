"""
Substitution Engine
Apply a glossary index to a short text.
"""
import re
import logging
from typing import Optional

from .index import GlossaryIndex
from .models import MatchTier, SubstitutionResult, TermMatch

logger = logging.getLogger(__name__)


class SubstitutionEngine:
    """
    Replace glossary terms in text, longest term first.

    Three strategies are tried per term:
    - Exact: the whole (trimmed) text is the term. Output is the
      translation and processing stops.
    - Word boundary: the term occurs as a whole word or phrase. Every
      occurrence is replaced and shorter terms are still tried on the
      updated text.
    - Partial: the term occurs inside the text but not on word
      boundaries. If the term is at least `partial_min_ratio` of the
      original text length, the whole output becomes the translation and
      processing stops.

    The partial rule is a coarse heuristic for near-exact phrases that
    differ by punctuation. It replaces the entire string on purpose.
    """

    PARTIAL_MIN_RATIO = 0.5

    def __init__(self, partial_min_ratio: Optional[float] = None):
        self.partial_min_ratio = (
            self.PARTIAL_MIN_RATIO if partial_min_ratio is None else partial_min_ratio
        )

    @staticmethod
    def word_pattern(term: str) -> "re.Pattern[str]":
        """Case-insensitive whole-word pattern with the term taken literally."""
        return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)

    def apply(self, text: str, index: GlossaryIndex) -> SubstitutionResult:
        if not index:
            return SubstitutionResult(translated_text=text, matched=False)

        result = SubstitutionResult(translated_text=text)

        # Order matters: each replacement changes the text later terms see
        for term in index.terms_longest_first():
            translation = index.get(term)
            current = result.translated_text
            current_lower = current.lower()

            if current_lower.strip() == term:
                logger.debug("Exact match: %r -> %r", term, translation)
                result.translated_text = translation
                result.matched = True
                result.matches.append(TermMatch(term, translation, MatchTier.EXACT))
                break

            pattern = self.word_pattern(term)
            if pattern.search(current):
                logger.debug("Word match: %r -> %r", term, translation)
                result.translated_text = pattern.sub(lambda _m: translation, current)
                result.matched = True
                result.matches.append(TermMatch(term, translation, MatchTier.WORD_BOUNDARY))

            elif term in current_lower:
                if len(term) >= len(text) * self.partial_min_ratio:
                    logger.debug("Partial match: %r -> %r", term, translation)
                    result.translated_text = translation
                    result.matched = True
                    result.matches.append(TermMatch(term, translation, MatchTier.PARTIAL))
                    break
                logger.debug("Partial match too short to trust: %r", term)

        return result
