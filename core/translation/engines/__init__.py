"""Translation Engines Package"""

from .base import TranslationEngine, TranslationResult, EngineStatus
from .langdock import LangdockEngine

__all__ = [
    "TranslationEngine",
    "TranslationResult",
    "EngineStatus",
    "LangdockEngine",
]
