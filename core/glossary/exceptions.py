"""
Glossary Exceptions
Failures on the glossary path. None of these reach the API caller; the
orchestrator turns each one into a fallback to the AI translator.
"""
from typing import List, Optional


class GlossaryError(Exception):
    """Base exception for the glossary path"""
    pass


class TableFetchError(GlossaryError):
    """A single table could not be fetched (missing, unauthorized, transport error)"""
    def __init__(self, table_name: str, message: str, status_code: Optional[int] = None):
        self.table_name = table_name
        self.status_code = status_code
        super().__init__(f"Table '{table_name}': {message}")


class GlossaryUnavailable(GlossaryError):
    """No candidate table for the language could be fetched"""
    def __init__(self, target_language: str, tried: List[str]):
        self.target_language = target_language
        self.tried = list(tried)
        super().__init__(
            f"No glossary table found for language: {target_language} "
            f"(tried {', '.join(repr(t) for t in tried)})"
        )


class NoUsableRecords(GlossaryError):
    """The table was found but no record produced a usable entry"""
    def __init__(self, table_name: str, record_count: int):
        self.table_name = table_name
        self.record_count = record_count
        super().__init__(
            f"Table '{table_name}' has no usable entries ({record_count} records)"
        )


class NoGlossaryMatch(GlossaryError):
    """The glossary loaded but no term fired for the text"""
    def __init__(self, table_name: str, term_count: int):
        self.table_name = table_name
        self.term_count = term_count
        super().__init__(f"No match among {term_count} terms from table '{table_name}'")
