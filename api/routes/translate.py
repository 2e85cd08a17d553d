"""
Translation endpoint.

POST /api/translate
    {"text": "Save changes", "targetLanguage": "German", "useGlossary": true}
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import get_orchestrator
from api.models import TranslateRequest, TranslateResponse, ErrorResponse
from config.logging_config import get_logger
from core.translation import (
    FallbackTranslationFailed,
    MissingTextError,
    TranslationOrchestrator,
    TranslatorNotConfigured,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Translation"])


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def translate(
    request: TranslateRequest,
    orchestrator: TranslationOrchestrator = Depends(get_orchestrator),
):
    """
    Translate a short English string.

    - **text**: English text (required)
    - **targetLanguage**: Target language name (default: German)
    - **useGlossary**: Prefer the organization glossary when it has a confident match
    """
    logger.info(
        "Translation requested",
        extra={
            "event": "translate_request",
            "language": request.target_language,
            "use_glossary": request.use_glossary,
        },
    )

    try:
        outcome = await orchestrator.translate(
            request.text, request.target_language, use_glossary=request.use_glossary
        )
    except MissingTextError as e:
        return _error(400, str(e))
    except TranslatorNotConfigured as e:
        return _error(500, str(e))
    except FallbackTranslationFailed as e:
        logger.error("Translation error: %s", e)
        return _error(500, "Translation failed", str(e))

    return outcome.to_response()
