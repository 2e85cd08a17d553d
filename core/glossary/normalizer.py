"""
Field Normalizer
Pull the English term and its translation out of a hand-labelled record.
"""
from typing import Any, Iterable, Mapping, Optional

from .config import GlossaryConfig, DEFAULT_GLOSSARY_CONFIG
from .models import GlossaryEntry, GlossaryRecord


def _as_text(value: Any) -> str:
    """Cell value as stripped text. Lists, dicts and booleans count as empty."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def first_value(fields: Mapping[str, Any], labels: Iterable[str]) -> str:
    """Return the first non-empty value among the given column labels."""
    for label in labels:
        text = _as_text(fields.get(label))
        if text:
            return text
    return ""


class FieldNormalizer:
    """
    Map a GlossaryRecord to a GlossaryEntry.

    Column labels are tried in configured order; a record missing either
    side is skipped, which is not an error.
    """

    def __init__(self, config: Optional[GlossaryConfig] = None):
        self.config = config or DEFAULT_GLOSSARY_CONFIG

    def normalize(self, record: GlossaryRecord, target_language: str) -> Optional[GlossaryEntry]:
        english = first_value(record.fields, self.config.english_columns)
        translation = first_value(
            record.fields, self.config.translation_column_labels(target_language)
        )
        if not english or not translation:
            return None
        return GlossaryEntry(english_term=english.lower(), translation=translation)
