"""
Base Translation Engine Abstract Class
All fallback translators must inherit from this class
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


class EngineStatus(Enum):
    """Engine availability status"""
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass
class TranslationResult:
    """Result of a translation operation"""
    translated_text: str
    target_language: str
    engine: str
    success: bool = True
    status_code: Optional[int] = None
    error: Optional[str] = None
    metadata: dict = field(default_factory=dict)


class TranslationEngine(ABC):
    """
    Abstract base class for translation engines.

    Engines report failures through TranslationResult(success=False)
    instead of raising.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable engine name"""
        pass

    @property
    @abstractmethod
    def engine_id(self) -> str:
        """Unique engine identifier"""
        pass

    @abstractmethod
    async def translate(self, text: str, target_language: str) -> TranslationResult:
        """
        Translate English text to the target language.

        Args:
            text: Text to translate
            target_language: Target language name (e.g. "German")

        Returns:
            TranslationResult with the raw translated text or an error
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if engine is configured.

        Returns:
            True if engine can accept translation requests
        """
        pass

    def get_status(self) -> EngineStatus:
        """Get current engine status"""
        if self.is_available():
            return EngineStatus.AVAILABLE
        return EngineStatus.UNAVAILABLE

    def get_info(self) -> dict:
        """Get engine information for API/UI"""
        return {
            "id": self.engine_id,
            "name": self.name,
            "available": self.is_available(),
            "status": self.get_status().value,
        }
