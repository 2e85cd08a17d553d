"""
Pydantic models for the API.

Field names follow the JSON contract of the translation plugin (camelCase).
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from config.settings import settings


class TranslateRequest(BaseModel):
    """Request model for POST /api/translate"""
    model_config = ConfigDict(populate_by_name=True)

    # Optional here so a missing text gets the 400 error body, not a 422
    text: Optional[str] = Field(default=None, description="English text to translate")
    target_language: str = Field(
        default=settings.default_target_language,
        alias="targetLanguage",
        description="Target language name (e.g. German)",
    )
    use_glossary: bool = Field(
        default=False,
        alias="useGlossary",
        description="Try the organization glossary before the AI translator",
    )


class TranslateResponse(BaseModel):
    """Response model for POST /api/translate"""
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText")
    original_text: str = Field(..., alias="originalText")
    target_language: str = Field(..., alias="targetLanguage")


class ErrorResponse(BaseModel):
    """Error body returned by the translation endpoint"""
    error: str
    details: Optional[str] = None
