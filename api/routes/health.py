"""
Health check endpoint.
"""

import time

from fastapi import APIRouter, Depends

from api.deps import get_orchestrator
from core.translation import TranslationOrchestrator

router = APIRouter(tags=["Health"])

VERSION = "1.0.0"


@router.get("/health")
async def health_check(orchestrator: TranslationOrchestrator = Depends(get_orchestrator)):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "version": VERSION,
        "glossary_configured": orchestrator.glossary_configured,
        "translator_configured": orchestrator.translator.is_available(),
        "translator": orchestrator.translator.get_info(),
        "timestamp": time.time(),
    }
