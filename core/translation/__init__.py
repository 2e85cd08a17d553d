"""
Translation Module
Glossary-first translation of short strings with AI fallback
"""

from .engines.base import TranslationEngine, TranslationResult
from .engines.langdock import LangdockEngine
from .exceptions import (
    TranslationError,
    MissingTextError,
    TranslatorNotConfigured,
    FallbackTranslationFailed,
)
from .orchestrator import (
    TranslationOrchestrator,
    TranslationOutcome,
    OrchestratorState,
    TranslationPath,
    FallbackReason,
    clean_translator_output,
)

__all__ = [
    # Orchestrator
    "TranslationOrchestrator",
    "TranslationOutcome",
    "OrchestratorState",
    "TranslationPath",
    "FallbackReason",
    "clean_translator_output",
    # Engines
    "TranslationEngine",
    "TranslationResult",
    "LangdockEngine",
    # Errors
    "TranslationError",
    "MissingTextError",
    "TranslatorNotConfigured",
    "FallbackTranslationFailed",
]
