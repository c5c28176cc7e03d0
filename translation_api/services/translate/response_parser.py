"""Parsing of raw provider output into a translation.

The provider is asked for strict JSON but is not trusted to deliver it.
classify_output() sorts any raw string into one of three shapes and
never raises; parse_translation() projects that shape onto the
(translated_text, detected_source_lang) pair stored with the record.

    {"detectedLang": "en", "translation": "Merhaba"}  → DetectedTranslation
    {"translation": "Merhaba"} or "Merhaba" (JSON)    → PlainTranslation
    Merhaba dünya (not JSON)                          → RawFallback
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Union

from translation_api.core.languages import UNKNOWN_LANG

# Stored when the reply is a JSON object without a usable "translation" field.
NO_TRANSLATION_MARKER = "[No translation returned]"

# The tag may follow a space only when it ends the opener line.
_FENCE_OPEN = re.compile(r"^```(?:[\w+-]+(?=\s|$)|[ \t]+[\w+-]+(?=[ \t]*(?:\n|$)))?[ \t]*\n?")
_FENCE_CLOSE = re.compile(r"\n?[ \t]*```$")


@dataclass(frozen=True)
class DetectedTranslation:
    detected_lang: str
    translation: str


@dataclass(frozen=True)
class PlainTranslation:
    translation: str


@dataclass(frozen=True)
class RawFallback:
    text: str


ProviderOutput = Union[DetectedTranslation, PlainTranslation, RawFallback]


@dataclass(frozen=True)
class ParsedTranslation:
    translated_text: str
    detected_source_lang: str | None


def strip_code_fence(raw: str) -> str:
    """Trim and remove a leading ```lang opener and a trailing ``` closer."""
    text = raw.strip()
    text = _FENCE_OPEN.sub("", text, count=1)
    text = _FENCE_CLOSE.sub("", text, count=1)
    return text.strip()


def _from_object(payload: dict[str, Any]) -> ProviderOutput:
    translation = payload.get("translation")
    if not isinstance(translation, str):
        translation = NO_TRANSLATION_MARKER

    detected = payload.get("detectedLang")
    if isinstance(detected, str) and detected.strip():
        return DetectedTranslation(detected_lang=detected.strip(), translation=translation)
    return PlainTranslation(translation=translation)


def classify_output(raw: str) -> ProviderOutput:
    """Sort raw provider text into a structured shape. Total: never raises."""
    text = strip_code_fence(raw)
    try:
        payload = json.loads(text)
    except (ValueError, RecursionError):
        return RawFallback(text=text)

    if isinstance(payload, str):
        return PlainTranslation(translation=payload)
    if isinstance(payload, dict):
        return _from_object(payload)
    # Numbers, arrays, booleans and null carry no translation field.
    return RawFallback(text=text)


def parse_translation(raw: str, auto_detect: bool) -> ParsedTranslation:
    """Turn raw provider text into the translated text and detected language.

    Args:
        raw: Text returned by the provider, possibly fenced or not JSON at all.
        auto_detect: Whether the request asked the provider to detect the
            source language.

    Returns:
        ParsedTranslation. detected_source_lang is only ever set when
        auto_detect is True: the uppercased detected code, None when the
        reply was JSON without one, or "UNKNOWN" on raw fallback.
    """
    output = classify_output(raw)

    if isinstance(output, DetectedTranslation):
        return ParsedTranslation(
            translated_text=output.translation,
            detected_source_lang=output.detected_lang.upper() if auto_detect else None,
        )
    if isinstance(output, PlainTranslation):
        return ParsedTranslation(translated_text=output.translation, detected_source_lang=None)
    return ParsedTranslation(
        translated_text=output.text,
        detected_source_lang=UNKNOWN_LANG if auto_detect else None,
    )
