"""
Shared fixtures for glossary and translation unit tests.
"""

from typing import Dict, List, Optional

import pytest

from core.glossary import GlossaryConfig, GlossaryRecord, TableFetchError, TableStore
from core.translation import TranslationEngine, TranslationResult


class FakeTableStore(TableStore):
    """In-memory table store that records every fetch."""

    def __init__(self, tables: Optional[Dict[str, List[dict]]] = None, errors: Optional[Dict[str, Exception]] = None):
        self.tables = tables or {}
        self.errors = errors or {}
        self.calls: List[str] = []

    async def fetch(self, table_name: str) -> List[GlossaryRecord]:
        self.calls.append(table_name)
        if table_name in self.errors:
            raise self.errors[table_name]
        if table_name not in self.tables:
            raise TableFetchError(table_name, "HTTP 404", status_code=404)
        return [GlossaryRecord(fields=f) for f in self.tables[table_name]]


class FakeTranslator(TranslationEngine):
    """Translator returning a canned result."""

    def __init__(self, output: str = "Übersetzt", success: bool = True,
                 status_code: Optional[int] = 200, error: Optional[str] = None,
                 available: bool = True):
        self.output = output
        self.success = success
        self.status_code = status_code
        self.error = error
        self.available = available
        self.calls: List[tuple] = []

    @property
    def name(self) -> str:
        return "Fake"

    @property
    def engine_id(self) -> str:
        return "fake"

    def is_available(self) -> bool:
        return self.available

    async def translate(self, text: str, target_language: str) -> TranslationResult:
        self.calls.append((text, target_language))
        return TranslationResult(
            translated_text=self.output if self.success else "",
            target_language=target_language,
            engine=self.engine_id,
            success=self.success,
            status_code=self.status_code,
            error=self.error,
        )


@pytest.fixture
def make_store():
    """Factory for FakeTableStore."""
    return FakeTableStore


@pytest.fixture
def make_translator():
    """Factory for FakeTranslator."""
    return FakeTranslator


@pytest.fixture
def synthetic_config():
    """Config with a made-up language set."""
    return GlossaryConfig(
        version=99,
        language_tables={"Elvish": ("Elvish terms", "ELV", "Quenya")},
        english_columns=("Term", "term"),
        translation_columns=("{language} word", "Target"),
    )


@pytest.fixture
def german_rows():
    """Rows as they appear in the German glossary table."""
    return [
        {"English source": "Save changes", "German translation": "Änderungen speichern"},
        {"English source": "Cancel", "German translation": "Abbrechen"},
        {"English source": "Save", "German translation": "Speichern"},
    ]
