"""
Glossary Models
Plain data types passed between the resolver, normalizer, index and matcher.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional


class MatchTier(str, Enum):
    """Strategy that made a glossary term fire."""
    EXACT = "exact"
    WORD_BOUNDARY = "word_boundary"
    PARTIAL = "partial"


@dataclass(frozen=True)
class GlossaryRecord:
    """
    One row from the terminology store.

    Column labels are whatever a human typed into the table header, so
    they vary between tables and languages.
    """
    fields: Mapping[str, Any]
    record_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def from_api(cls, data: dict) -> "GlossaryRecord":
        """Build from an Airtable record payload ({"id": ..., "fields": {...}})."""
        return cls(fields=data.get("fields") or {}, record_id=data.get("id"))


@dataclass(frozen=True)
class GlossaryEntry:
    """A resolved English term and its translation."""
    english_term: str
    translation: str


@dataclass(frozen=True)
class ResolvedTable:
    """The first candidate table that could be fetched."""
    name: str
    records: List[GlossaryRecord]
    tried: List[str] = field(default_factory=list)


@dataclass
class TermMatch:
    """A glossary term that changed the text."""
    term: str
    translation: str
    tier: MatchTier


@dataclass
class SubstitutionResult:
    """Output of the substitution engine."""
    translated_text: str
    matched: bool = False
    matches: List[TermMatch] = field(default_factory=list)

    @property
    def tiers(self) -> List[MatchTier]:
        return [m.tier for m in self.matches]
