"""Translate orchestration: cache lookup, provider call, audit write.

Flow for one request:
  1. Re-check the auto-detect / sourceLang invariant (fail fast, nothing stored)
  2. Exact-key cache lookup → hit returns immediately
  3. Build prompt → call provider → classify the outcome
  4. Parse the reply (never raises) or substitute the failure sentinel
  5. Append a SUCCESS or FAILED record
  6. Return the text with from_cache=False, even on FAILED

Provider failures never reach the caller. Storage failures do.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from translation_api.core.config import Settings
from translation_api.core.exceptions import (
    ProviderCredentialError,
    ProviderEmptyResponseError,
    ProviderError,
    ProviderInvalidResponseError,
    ProviderNetworkError,
    ProviderStatusError,
    ProviderTimeoutError,
    RequestValidationFailed,
)
from translation_api.core.languages import AUTO_SOURCE_LANG
from translation_api.db.translation_store import TranslationCacheStore
from translation_api.services.llm.base import LLMProvider
from translation_api.services.translate.prompt_builder import build_prompt
from translation_api.services.translate.response_parser import parse_translation
from translation_api.services.translate.types import (
    FAILURE_SENTINEL,
    TranslateResult,
    TranslationRecord,
    TranslationRequest,
    TranslationStatus,
)

logger = structlog.get_logger(__name__)


class ProviderFailureKind(str, Enum):
    CREDENTIAL_MISSING = "credential_missing"
    NETWORK = "network"
    TIMEOUT = "timeout"
    BAD_STATUS = "bad_status"
    INVALID_BODY = "invalid_body"
    EMPTY_RESPONSE = "empty_response"
    UNEXPECTED = "unexpected"


_FAILURE_KINDS: dict[type[ProviderError], ProviderFailureKind] = {
    ProviderCredentialError: ProviderFailureKind.CREDENTIAL_MISSING,
    ProviderNetworkError: ProviderFailureKind.NETWORK,
    ProviderTimeoutError: ProviderFailureKind.TIMEOUT,
    ProviderStatusError: ProviderFailureKind.BAD_STATUS,
    ProviderInvalidResponseError: ProviderFailureKind.INVALID_BODY,
    ProviderEmptyResponseError: ProviderFailureKind.EMPTY_RESPONSE,
}


def classify_provider_failure(error: Exception) -> ProviderFailureKind:
    """Map any exception from the provider call onto a failure kind."""
    for error_type, kind in _FAILURE_KINDS.items():
        if isinstance(error, error_type):
            return kind
    return ProviderFailureKind.UNEXPECTED


@dataclass(frozen=True)
class ProviderOutcome:
    """Result of one provider call: raw reply text or a failure kind."""

    raw: str | None = None
    failure: ProviderFailureKind | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def ensure_detect_invariant(request: TranslationRequest) -> None:
    """Exactly one of (source_lang present, auto_detect) must hold."""
    if not request.auto_detect and request.source_lang is None:
        raise RequestValidationFailed(
            "sourceLang is required when autoLangDetection is false",
            fields=[{
                "field": "sourceLang",
                "message": "sourceLang is required when autoLangDetection is false",
            }],
        )
    if request.auto_detect and request.source_lang is not None:
        raise RequestValidationFailed(
            "sourceLang must not be provided when autoLangDetection is true",
            fields=[{
                "field": "sourceLang",
                "message": "sourceLang must not be provided when autoLangDetection is true",
            }],
        )


def resolve_source_lang(request: TranslationRequest) -> str:
    """Stored source language: the request's code, or AUTO when detecting."""
    if request.auto_detect:
        return AUTO_SOURCE_LANG
    return request.source_lang.value


class TranslateService:
    """Serves translations from the cache, falling back to the provider."""

    def __init__(
        self,
        store: TranslationCacheStore,
        llm: LLMProvider,
        settings: Settings,
    ) -> None:
        self._store = store
        self._llm = llm
        self._provider_label = settings.translation_provider
        self._model = settings.gemini_model

    async def translate(self, request: TranslationRequest) -> TranslateResult:
        ensure_detect_invariant(request)

        source_lang = resolve_source_lang(request)
        target_lang = request.target_lang.value

        cached = await self._store.find_exact(source_lang, target_lang, request.text)
        if cached is not None:
            logger.info(
                "translation_cache_hit",
                source_lang=source_lang,
                target_lang=target_lang,
                cached_status=cached.status,
            )
            return TranslateResult(translated_text=cached.translated_text, from_cache=True)

        logger.info(
            "translation_cache_miss",
            source_lang=source_lang,
            target_lang=target_lang,
            auto_detect=request.auto_detect,
            text_len=len(request.text),
        )

        prompt = build_prompt(
            text=request.text,
            target_lang=request.target_lang,
            source_lang=request.source_lang,
            auto_detect=request.auto_detect,
        )
        outcome = await self._call_provider(prompt)

        if outcome.ok:
            parsed = parse_translation(outcome.raw, request.auto_detect)
            translated_text = parsed.translated_text
            detected_source_lang = parsed.detected_source_lang
            status = TranslationStatus.SUCCESS
        else:
            logger.error(
                "provider_call_failed",
                failure_kind=outcome.failure.value,
                error=outcome.detail,
                provider=self._provider_label,
                model=self._model,
            )
            translated_text = FAILURE_SENTINEL
            detected_source_lang = None
            status = TranslationStatus.FAILED

        await self._store.insert(
            TranslationRecord(
                source_lang=source_lang,
                target_lang=target_lang,
                source_text=request.text,
                translated_text=translated_text,
                detected_source_lang=detected_source_lang,
                provider=self._provider_label,
                model=self._model,
                status=status,
            )
        )
        logger.info(
            "translation_recorded",
            status=status.value,
            source_lang=source_lang,
            target_lang=target_lang,
            detected_source_lang=detected_source_lang,
        )

        return TranslateResult(translated_text=translated_text, from_cache=False)

    async def _call_provider(self, prompt: str) -> ProviderOutcome:
        """Call the provider and turn any failure into a ProviderOutcome value."""
        try:
            raw = await self._llm.generate_content(prompt)
        except Exception as e:
            return ProviderOutcome(failure=classify_provider_failure(e), detail=str(e))
        return ProviderOutcome(raw=raw)
