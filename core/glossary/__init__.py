"""
Glossary Module
Organization-curated terminology lookup for short UI strings.

Features:
- Table resolution across naming variants (German translations, DE, Deutsch, ...)
- Field normalization across inconsistent column labels
- Case-insensitive term index
- Layered substitution (exact, word boundary, partial)

Usage:
    from core.glossary import AirtableTableStore, TableResolver, GlossaryIndex, SubstitutionEngine

    resolver = TableResolver(AirtableTableStore(api_key, base_id))
    table = await resolver.resolve("German")
    index = GlossaryIndex.build(table.records, "German")
    result = SubstitutionEngine().apply("Save changes", index)
"""

from .config import GlossaryConfig, DEFAULT_GLOSSARY_CONFIG
from .exceptions import (
    GlossaryError,
    TableFetchError,
    GlossaryUnavailable,
    NoUsableRecords,
    NoGlossaryMatch,
)
from .models import (
    GlossaryRecord,
    GlossaryEntry,
    ResolvedTable,
    MatchTier,
    TermMatch,
    SubstitutionResult,
)
from .table_store import TableStore, AirtableTableStore
from .resolver import TableResolver
from .normalizer import FieldNormalizer
from .index import GlossaryIndex
from .matcher import SubstitutionEngine

__all__ = [
    # Config
    "GlossaryConfig",
    "DEFAULT_GLOSSARY_CONFIG",
    # Errors
    "GlossaryError",
    "TableFetchError",
    "GlossaryUnavailable",
    "NoUsableRecords",
    "NoGlossaryMatch",
    # Models
    "GlossaryRecord",
    "GlossaryEntry",
    "ResolvedTable",
    "MatchTier",
    "TermMatch",
    "SubstitutionResult",
    # Components
    "TableStore",
    "AirtableTableStore",
    "TableResolver",
    "FieldNormalizer",
    "GlossaryIndex",
    "SubstitutionEngine",
]

__version__ = "1.0.0"
