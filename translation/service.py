"""
Translation Service

FastAPI endpoints for text translation using LLM.

Translation failures (service not configured, LLM errors, invalid input)
are answered with HTTP 200 and the failure message in the payload.
"""
import logging

from fastapi import APIRouter

from language.config import FALLBACK_LANGUAGE, SUPPORTED_LANGUAGES
from logs.logging_config import RequestContext
from .config import (
    TRANSLATION_MAX_BATCH_SIZE,
    TRANSLATION_MAX_TEXT_CHARS,
)
from .schemas import (
    TranslationRequest,
    TranslationResponse,
    BatchTranslationRequest,
    BatchTranslationResponse,
    TranslatedItem,
)
from .translator import Translator

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(tags=["Translation"])


# =====================
# API Endpoints
# =====================

@router.post("/translate", response_model=TranslationResponse, response_model_exclude_none=True)
async def translate_text_endpoint(request: TranslationRequest):
    """
    Translate text.

    **Request Body:**
    - `text`: Text to translate (required)
    - `destination`: Target languages in priority order; the second one is
      used when the text is already in the first
    - `source`: Source language (auto-detected if not provided)

    **Returns:**
    - `text`, `from`, `to`
    - `result`: Translated paragraphs, or the failure message
    """
    with RequestContext() as ctx:
        logger.info(
            f"[TRANSLATE_TEXT] START | request_id={ctx.request_id} | "
            f"chars={len(request.text)} | destination={request.destination} | source={request.source}"
        )

        outcome = await Translator().translate(
            text=request.text,
            destinations=request.destination,
            source=request.source
        )
        pair = outcome.language_pair

        if outcome.ok:
            result = outcome.paragraphs
            logger.info(f"[TRANSLATE_TEXT] END | request_id={ctx.request_id} | paragraphs={len(result)}")
        else:
            result = [outcome.message]
            logger.info(
                f"[TRANSLATE_TEXT] DEGRADED | request_id={ctx.request_id} | kind={outcome.error_kind.value}"
            )

        return TranslationResponse(
            text=request.text,
            from_=pair.source if pair else (request.source or ""),
            to=pair.target if pair else (request.destination[0] if request.destination else FALLBACK_LANGUAGE),
            result=result,
        )


@router.post("/translate/batch", response_model=BatchTranslationResponse, response_model_exclude_none=True)
async def translate_batch_endpoint(request: BatchTranslationRequest):
    """
    Translate multiple texts with the same language pair.

    **Request Body:**
    - `texts`: List of texts to translate (required)
    - `destination`: Target languages in priority order
    - `source`: Source language (auto-detected if not provided)

    **Returns:**
    - `status`: "completed", or "failed" with `message` (no partial results)
    - `translations`: One item per input text, in input order
    """
    with RequestContext() as ctx:
        logger.info(
            f"[TRANSLATE_BATCH] START | request_id={ctx.request_id} | "
            f"items={len(request.texts)} | destination={request.destination}"
        )

        outcome = await Translator().translate_batch(
            texts=request.texts,
            destinations=request.destination,
            source=request.source
        )
        pair = outcome.language_pair

        if not outcome.ok:
            logger.info(
                f"[TRANSLATE_BATCH] DEGRADED | request_id={ctx.request_id} | kind={outcome.error_kind.value}"
            )
            return BatchTranslationResponse(
                from_=pair.source if pair else None,
                to=pair.target if pair else None,
                status="failed",
                message=outcome.message,
            )

        translations = [
            TranslatedItem(index=i, text=original, result=paragraphs)
            for i, (original, paragraphs) in enumerate(zip(request.texts, outcome.items))
        ]

        logger.info(f"[TRANSLATE_BATCH] END | request_id={ctx.request_id} | items={len(translations)}")

        return BatchTranslationResponse(
            from_=pair.source,
            to=pair.target,
            status="completed",
            translations=translations,
        )


@router.get("/translate/config")
async def get_translation_config():
    """
    Get the translation limits and supported languages.
    """
    return {
        "supported_languages": SUPPORTED_LANGUAGES,
        "fallback_language": FALLBACK_LANGUAGE,
        "max_batch_size": TRANSLATION_MAX_BATCH_SIZE,
        "max_text_chars": TRANSLATION_MAX_TEXT_CHARS,
    }
