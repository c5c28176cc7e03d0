"""Field validation for incoming translate payloads.

validate_translate_payload() is the single gate between the HTTP body and
TranslationRequest. It collects every field problem before failing so the
caller gets one structured error listing all of them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from translation_api.core.exceptions import RequestValidationFailed
from translation_api.core.languages import Lang, normalize_lang
from translation_api.services.translate.types import TranslationRequest

_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


def coerce_auto_detect(value: Any) -> bool:
    """Accept true/false, "true"/"false", 1/0 and "1"/"0". None means False."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"autoLangDetection must be a boolean, got {value!r}")


def _lang_error(field: str, value: Any) -> dict[str, str]:
    allowed = ", ".join(lang.value for lang in Lang)
    return {
        "field": field,
        "message": f"{field} must be one of: {allowed} (got {value!r})",
    }


def validate_translate_payload(payload: Mapping[str, Any]) -> TranslationRequest:
    """Validate a camelCase translate payload and build a TranslationRequest.

    Raises:
        RequestValidationFailed: with one entry per offending field.
    """
    errors: list[dict[str, str]] = []

    text = payload.get("text")
    if not isinstance(text, str) or not text:
        errors.append({"field": "text", "message": "text must be a non-empty string"})

    auto_detect = False
    try:
        auto_detect = coerce_auto_detect(payload.get("autoLangDetection"))
    except ValueError as e:
        errors.append({"field": "autoLangDetection", "message": str(e)})

    target_lang: Lang | None = None
    raw_target = payload.get("targetLang")
    if not isinstance(raw_target, str):
        errors.append(_lang_error("targetLang", raw_target))
    else:
        try:
            target_lang = normalize_lang(raw_target)
        except ValueError:
            errors.append(_lang_error("targetLang", raw_target))

    source_lang: Lang | None = None
    raw_source = payload.get("sourceLang")
    if raw_source == "":
        raw_source = None
    if raw_source is not None:
        if auto_detect:
            errors.append({
                "field": "sourceLang",
                "message": "sourceLang must not be provided when autoLangDetection is true",
            })
        elif not isinstance(raw_source, str):
            errors.append(_lang_error("sourceLang", raw_source))
        else:
            try:
                source_lang = normalize_lang(raw_source)
            except ValueError:
                errors.append(_lang_error("sourceLang", raw_source))
    elif not auto_detect:
        errors.append({
            "field": "sourceLang",
            "message": "sourceLang is required when autoLangDetection is false",
        })

    if errors:
        raise RequestValidationFailed(
            message="; ".join(e["message"] for e in errors),
            fields=errors,
        )

    return TranslationRequest(
        text=text,
        target_lang=target_lang,
        source_lang=source_lang,
        auto_detect=auto_detect,
    )
