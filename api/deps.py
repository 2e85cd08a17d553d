"""
Dependency getters for API route modules.

A new orchestrator is built per request; nothing glossary-related is
shared between requests. Tests replace it through
`app.dependency_overrides[get_orchestrator]`.
"""

from typing import Optional

from config.settings import Settings, settings
from config.logging_config import get_logger
from core.glossary import (
    AirtableTableStore,
    DEFAULT_GLOSSARY_CONFIG,
    GlossaryConfig,
    TableResolver,
)
from core.translation import LangdockEngine, TranslationOrchestrator

logger = get_logger(__name__)


def build_orchestrator(
    app_settings: Optional[Settings] = None,
    glossary_config: Optional[GlossaryConfig] = None,
) -> TranslationOrchestrator:
    """Wire the orchestrator from settings."""
    cfg = app_settings or settings

    translator = LangdockEngine(
        api_key=cfg.langdock_api_key,
        api_url=cfg.langdock_api_url,
        model=cfg.langdock_model,
        max_tokens=cfg.langdock_max_tokens,
        temperature=cfg.langdock_temperature,
        timeout=cfg.translator_timeout,
    )

    resolver = None
    if cfg.glossary_configured:
        logger.debug("Glossary configured for base %s", cfg.airtable_base_id)
        store = AirtableTableStore(
            api_key=cfg.airtable_api_key,
            base_id=cfg.airtable_base_id,
            api_url=cfg.airtable_api_url,
            timeout=cfg.glossary_timeout,
            max_pages=cfg.glossary_max_pages,
        )
        resolver = TableResolver(store, glossary_config or DEFAULT_GLOSSARY_CONFIG)
    else:
        logger.debug("Glossary credentials missing, AI translation only")

    return TranslationOrchestrator(translator, resolver=resolver)


def get_orchestrator() -> TranslationOrchestrator:
    """FastAPI dependency: orchestrator for the current request."""
    return build_orchestrator()
