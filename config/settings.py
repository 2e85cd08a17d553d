#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Fallback translator (Langdock) ==========
    langdock_api_key: str = ""
    langdock_api_url: str = "https://api.langdock.com/v1/chat/completions"
    langdock_model: str = "gpt-4"
    langdock_max_tokens: int = 150
    langdock_temperature: float = 0.3
    translator_timeout: float = 30.0  # seconds

    # ========== Glossary store (Airtable) ==========
    airtable_api_key: str = ""
    airtable_base_id: str = ""
    airtable_api_url: str = "https://api.airtable.com/v0"
    glossary_timeout: float = 10.0  # seconds, per page request
    glossary_max_pages: int = 20  # 100 records per page

    # ========== Languages ==========
    default_target_language: str = "German"

    # ========== Service ==========
    # CORS origins (comma-separated in env, parsed to list). "*" allows any origin.
    cors_origins: str = "*"
    log_level: str = "INFO"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    @property
    def glossary_configured(self) -> bool:
        """Both Airtable credentials are present"""
        return bool(self.airtable_api_key and self.airtable_base_id)

    @property
    def translator_configured(self) -> bool:
        return bool(self.langdock_api_key)

    def get_cors_origins(self) -> List[str]:
        """Get CORS origins as a list. Falls back to allowing any origin."""
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins or ["*"]


# Global settings instance
settings = Settings()
