"""Google Gemini provider over the generateContent REST endpoint.

Instantiated once in the FastAPI lifespan with the startup Settings.
The API version is configurable, so the REST endpoint is called directly
through a pooled httpx.AsyncClient rather than through an SDK.
Every call has a bounded timeout and structured error logging.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from translation_api.core.config import Settings
from translation_api.core.exceptions import (
    ProviderCredentialError,
    ProviderEmptyResponseError,
    ProviderInvalidResponseError,
    ProviderNetworkError,
    ProviderStatusError,
    ProviderTimeoutError,
)
from translation_api.services.llm.base import LLMProvider

logger = structlog.get_logger(__name__)


def extract_text(payload: Any) -> str | None:
    """Pull the first non-blank candidates[0].content.parts[*].text, trimmed."""
    if not isinstance(payload, dict):
        return None
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None

    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return None

    for part in parts:
        if isinstance(part, dict):
            text = part.get("text")
            if isinstance(text, str) and text.strip():
                return text.strip()
    return None


class GeminiProvider(LLMProvider):
    """Gemini generateContent client."""

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = settings.gemini_api_key
        self._model = settings.gemini_model
        self._base_url = (
            f"{settings.gemini_base_url.rstrip('/')}/{settings.gemini_api_version}"
        )
        self._timeout = settings.provider_timeout_seconds
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout)
        )
        logger.info(
            "gemini_provider_initialized",
            model=self._model,
            api_version=settings.gemini_api_version,
            timeout_seconds=self._timeout,
        )

    @property
    def model(self) -> str:
        return self._model

    async def generate_content(
        self,
        prompt: str,
        model_override: str | None = None,
    ) -> str:
        """POST the prompt to Gemini and return the first text part."""
        if not self._api_key:
            logger.error("gemini_api_key_missing")
            raise ProviderCredentialError()

        model = model_override or self._model
        url = f"{self._base_url}/models/{model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            response = await self._client.post(
                url,
                params={"key": self._api_key},
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            logger.error(
                "gemini_generate_timeout",
                model=model,
                timeout_seconds=self._timeout,
                prompt_len=len(prompt),
            )
            raise ProviderTimeoutError(
                f"Gemini API timed out after {self._timeout}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error("gemini_network_error", model=model, error=str(e))
            raise ProviderNetworkError(f"Gemini API network error: {e}") from e

        if not response.is_success:
            logger.error(
                "gemini_bad_status",
                model=model,
                status_code=response.status_code,
            )
            raise ProviderStatusError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("gemini_invalid_json", model=model, body_len=len(response.content))
            raise ProviderInvalidResponseError() from e

        text = extract_text(data)
        if not text:
            logger.warning(
                "gemini_empty_response",
                model=model,
                prompt_len=len(prompt),
            )
            raise ProviderEmptyResponseError()

        logger.debug(
            "gemini_generate_ok",
            model=model,
            prompt_len=len(prompt),
            reply_len=len(text),
        )
        return text

    async def aclose(self) -> None:
        """Close the pooled HTTP client."""
        await self._client.aclose()
