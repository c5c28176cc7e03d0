"""Custom exception classes for structured error handling."""

from typing import Any


class TranslatorError(Exception):
    """Base exception for all translation service errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class RequestValidationFailed(TranslatorError):
    """A translation request broke a field rule or the detect/source invariant."""

    def __init__(
        self,
        message: str = "Invalid translation request",
        fields: list[dict[str, str]] | None = None,
    ) -> None:
        super().__init__(code="VALIDATION_ERROR", message=message, status_code=400)
        self.fields = fields or []

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["error"]["fields"] = self.fields
        return body


class StorageError(TranslatorError):
    def __init__(self, message: str = "Translation store operation failed") -> None:
        super().__init__(code="STORAGE_ERROR", message=message, status_code=503)


# ---------------------------------------------------------------------------
# Provider errors: absorbed by TranslateService, never shown to callers
# ---------------------------------------------------------------------------


class ProviderError(TranslatorError):
    """Base for every failure of the generative-AI provider call."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code=code, message=message, status_code=502)


class ProviderCredentialError(ProviderError):
    def __init__(self, message: str = "GEMINI_API_KEY is not set") -> None:
        super().__init__(code="PROVIDER_CREDENTIAL_MISSING", message=message)


class ProviderNetworkError(ProviderError):
    def __init__(self, message: str = "Provider network error") -> None:
        super().__init__(code="PROVIDER_NETWORK_ERROR", message=message)


class ProviderTimeoutError(ProviderError):
    def __init__(self, message: str = "Provider call timed out") -> None:
        super().__init__(code="PROVIDER_TIMEOUT", message=message)


class ProviderStatusError(ProviderError):
    def __init__(self, status: int, body: str = "") -> None:
        super().__init__(
            code="PROVIDER_BAD_STATUS",
            message=f"Gemini API error {status}: {body}",
        )
        self.status = status
        self.body = body


class ProviderInvalidResponseError(ProviderError):
    def __init__(self, message: str = "Gemini API: invalid JSON response") -> None:
        super().__init__(code="PROVIDER_INVALID_BODY", message=message)


class ProviderEmptyResponseError(ProviderError):
    def __init__(self, message: str = "Gemini API returned empty response") -> None:
        super().__init__(code="PROVIDER_EMPTY_RESPONSE", message=message)
