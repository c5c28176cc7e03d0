"""Data contracts shared by the validator, prompt builder, parser and service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from translation_api.core.languages import Lang

# Returned to the caller and stored when the provider produced nothing usable.
FAILURE_SENTINEL = "[Translation failed]"


class TranslationStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


@dataclass(frozen=True)
class TranslationRequest:
    """A request that passed field validation."""

    text: str
    target_lang: Lang
    source_lang: Lang | None = None
    auto_detect: bool = False


@dataclass(frozen=True)
class TranslationRecord:
    """Values for one row of the translations table."""

    source_lang: str
    target_lang: str
    source_text: str
    translated_text: str
    detected_source_lang: str | None
    provider: str
    model: str
    status: TranslationStatus


@dataclass(frozen=True)
class TranslateResult:
    translated_text: str
    from_cache: bool
