#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for the glossary translation service.

Thin shell: app creation, CORS, router includes, error handler.

Usage:
    uvicorn api.main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import settings
from config.logging_config import get_logger, setup_logging

from api.routes.health import router as health_router, VERSION
from api.routes.translate import router as translate_router

setup_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info(
        "Translation service starting (glossary %s, translator %s)",
        "configured" if settings.glossary_configured else "not configured",
        "configured" if settings.translator_configured else "not configured",
    )
    yield
    logger.info("Translation service shutting down")


app = FastAPI(
    title="Glossary Translation API",
    description="Translate short UI strings, preferring the organization glossary over AI translation",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware - the design plugin calls from its own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(health_router)
app.include_router(translate_router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Translation failed", "details": str(exc)},
    )


# For running with python -m
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
