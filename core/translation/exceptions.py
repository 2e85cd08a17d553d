"""
Translation Exceptions
Errors that reach the API caller.
"""
from typing import Optional


class TranslationError(Exception):
    """Base exception for translation requests"""
    pass


class MissingTextError(TranslationError, ValueError):
    """No text was given to translate"""
    def __init__(self):
        super().__init__("Text to translate is required")


class TranslatorNotConfigured(TranslationError):
    """The fallback translator has no credentials"""
    def __init__(self):
        super().__init__("Translation service not configured")


class FallbackTranslationFailed(TranslationError):
    """The AI translator failed or returned nothing"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
