"""Unit tests for validate_translate_payload() and coerce_auto_detect().

Tests:
  - language codes are uppercased and checked against the closed set
  - sourceLang required when autoLangDetection is false
  - sourceLang forbidden when autoLangDetection is true
  - empty-string sourceLang counts as absent
  - autoLangDetection accepts boolean/string/numeric equivalents
  - every field problem is reported in one error
"""

from __future__ import annotations

import pytest

from translation_api.core.exceptions import RequestValidationFailed
from translation_api.core.languages import AUTO_SOURCE_LANG, Lang
from translation_api.services.translate.validation import (
    coerce_auto_detect,
    validate_translate_payload,
)


class TestCoerceAutoDetect:
    @pytest.mark.parametrize("value", [True, "true", "TRUE", " True ", 1, "1"])
    def test_truthy(self, value: object) -> None:
        assert coerce_auto_detect(value) is True

    @pytest.mark.parametrize("value", [False, "false", "False", 0, "0", None])
    def test_falsy(self, value: object) -> None:
        assert coerce_auto_detect(value) is False

    @pytest.mark.parametrize("value", ["yes", 2, "", 1.0])
    def test_rejected(self, value: object) -> None:
        with pytest.raises(ValueError):
            coerce_auto_detect(value)


class TestValidatePayload:
    def test_explicit_source_normalized(self) -> None:
        req = validate_translate_payload(
            {"text": "Hello", "targetLang": "tr", "sourceLang": "en"}
        )
        assert req.text == "Hello"
        assert req.target_lang is Lang.TR
        assert req.source_lang is Lang.EN
        assert req.auto_detect is False

    def test_auto_detect_without_source(self) -> None:
        req = validate_translate_payload(
            {"text": "Hello", "targetLang": "De", "autoLangDetection": "true"}
        )
        assert req.target_lang is Lang.DE
        assert req.source_lang is None
        assert req.auto_detect is True

    def test_empty_source_lang_treated_as_absent(self) -> None:
        req = validate_translate_payload(
            {"text": "Hello", "targetLang": "TR", "sourceLang": "", "autoLangDetection": True}
        )
        assert req.source_lang is None

    def test_missing_source_lang_rejected(self) -> None:
        with pytest.raises(RequestValidationFailed) as exc:
            validate_translate_payload({"text": "Hello", "targetLang": "TR"})
        assert "sourceLang is required when autoLangDetection is false" in exc.value.message
        assert exc.value.status_code == 400

    def test_source_lang_with_auto_detect_rejected(self) -> None:
        with pytest.raises(RequestValidationFailed) as exc:
            validate_translate_payload(
                {"text": "Hello", "targetLang": "TR", "sourceLang": "EN", "autoLangDetection": 1}
            )
        assert exc.value.fields == [{
            "field": "sourceLang",
            "message": "sourceLang must not be provided when autoLangDetection is true",
        }]

    def test_unknown_target_rejected(self) -> None:
        with pytest.raises(RequestValidationFailed) as exc:
            validate_translate_payload({"text": "Hello", "targetLang": "xx", "sourceLang": "EN"})
        assert exc.value.fields[0]["field"] == "targetLang"

    def test_auto_sentinel_is_not_requestable(self) -> None:
        with pytest.raises(RequestValidationFailed):
            validate_translate_payload(
                {"text": "Hello", "targetLang": "TR", "sourceLang": AUTO_SOURCE_LANG}
            )

    def test_empty_text_rejected(self) -> None:
        with pytest.raises(RequestValidationFailed) as exc:
            validate_translate_payload({"text": "", "targetLang": "TR", "sourceLang": "EN"})
        assert exc.value.fields[0]["field"] == "text"

    def test_whitespace_text_is_kept_verbatim(self) -> None:
        req = validate_translate_payload({"text": "  hi  ", "targetLang": "TR", "sourceLang": "EN"})
        assert req.text == "  hi  "

    def test_all_errors_collected(self) -> None:
        with pytest.raises(RequestValidationFailed) as exc:
            validate_translate_payload({"text": None, "targetLang": None})
        fields = {e["field"] for e in exc.value.fields}
        assert fields == {"text", "targetLang", "sourceLang"}

    def test_error_body_shape(self) -> None:
        with pytest.raises(RequestValidationFailed) as exc:
            validate_translate_payload({"text": "Hello", "targetLang": "TR"})
        body = exc.value.to_dict()
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["fields"][0]["field"] == "sourceLang"
