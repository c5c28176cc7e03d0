"""Translate request/response schemas.

The request schema only fixes the JSON shape for the OpenAPI docs.
Request fields are left untyped so wrongly typed values reach the
validator and come back as a 400 VALIDATION_ERROR, not a 422. Field rules (enum membership, casing, the autoLangDetection/sourceLang
pairing) are enforced by validate_translate_payload().
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequestBody(BaseModel):
    """POST /v1/translate request body."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "text": "Hello world",
                "targetLang": "TR",
                "sourceLang": "EN",
                "autoLangDetection": False,
            }
        },
    )

    text: Any = Field(default=None, description="The text to be translated.")
    target_lang: Any = Field(
        default=None,
        alias="targetLang",
        description="Target language code, any letter case.",
    )
    source_lang: Any = Field(
        default=None,
        alias="sourceLang",
        description=(
            "Source language code. Required when autoLangDetection is false; "
            "must be omitted when it is true."
        ),
    )
    auto_lang_detection: Any = Field(
        default=False,
        alias="autoLangDetection",
        description='Detect the source language. Accepts true/false, "true"/"false", 1/0.',
    )

    def to_payload(self) -> dict:
        """camelCase dict as received, for validate_translate_payload()."""
        return self.model_dump(by_alias=True)


class TranslateResponse(BaseModel):
    """POST /v1/translate response body."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {"translatedText": "Merhaba dünya", "fromCache": False}
        },
    )

    translated_text: str = Field(alias="translatedText")
    from_cache: bool = Field(alias="fromCache")


class HealthResponse(BaseModel):
    """GET /v1/health response body."""

    status: str
    database: str
