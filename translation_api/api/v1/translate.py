"""Translate endpoint."""

import structlog
from fastapi import APIRouter, Depends

from translation_api.api.deps import get_translate_service
from translation_api.schemas.translate import TranslateRequestBody, TranslateResponse
from translation_api.services.translate.service import TranslateService
from translation_api.services.translate.validation import validate_translate_payload

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/translate", tags=["translate"])


@router.post(
    "",
    response_model=TranslateResponse,
    summary="Translate text with the generative-AI provider, using the database as a cache.",
    description=(
        "Translates the input text into the target language. Existing translations "
        "for the exact (sourceLang, targetLang, text) triple are returned from the "
        "database without calling the provider. A provider failure still returns "
        "200 with the failure placeholder text."
    ),
)
async def translate(
    body: TranslateRequestBody,
    service: TranslateService = Depends(get_translate_service),
) -> TranslateResponse:
    """Validate the body, then run the cached translation flow."""
    request = validate_translate_payload(body.to_payload())
    result = await service.translate(request)
    return TranslateResponse(
        translated_text=result.translated_text,
        from_cache=result.from_cache,
    )
