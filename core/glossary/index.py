"""
Glossary Index
Case-insensitive English term -> translation lookup, built per request.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import GlossaryRecord
from .normalizer import FieldNormalizer

logger = logging.getLogger(__name__)


class GlossaryIndex:
    """
    Mapping from normalized (trimmed, lowercased) English term to translation.

    Duplicate terms, including case variants, keep the last translation seen.
    An empty index is valid and means the table held no usable data.
    """

    def __init__(self, terms: Optional[Dict[str, str]] = None):
        self._terms: Dict[str, str] = {}
        for term, translation in (terms or {}).items():
            self.add(term, translation)

    @classmethod
    def build(
        cls,
        records: Iterable[GlossaryRecord],
        target_language: str,
        normalizer: Optional[FieldNormalizer] = None,
    ) -> "GlossaryIndex":
        """Normalize records into an index, skipping incomplete ones."""
        normalizer = normalizer or FieldNormalizer()
        index = cls()
        skipped = 0
        for record in records:
            entry = normalizer.normalize(record, target_language)
            if entry is None:
                skipped += 1
                continue
            index.add(entry.english_term, entry.translation)

        logger.debug("Indexed %d terms, skipped %d records", index.size, skipped)
        return index

    def add(self, term: str, translation: str):
        key = term.strip().lower()
        value = translation.strip()
        if key and value:
            self._terms[key] = value

    @property
    def size(self) -> int:
        return len(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __bool__(self) -> bool:
        return bool(self._terms)

    def __contains__(self, term: str) -> bool:
        return term.strip().lower() in self._terms

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def get(self, term: str) -> Optional[str]:
        return self._terms.get(term.strip().lower())

    def items(self) -> List[Tuple[str, str]]:
        return list(self._terms.items())

    def terms_longest_first(self) -> List[str]:
        """Terms by descending length, so phrases come before the words inside them."""
        return sorted(self._terms, key=len, reverse=True)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._terms)
