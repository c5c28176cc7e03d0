"""Provider prompt templates for the translate operation.

Two fixed templates keyed on auto-detection. Both demand strict JSON with no
markdown fences; the response parser still tolerates fenced or free-form
replies.
"""

from __future__ import annotations

import json

from translation_api.core.languages import Lang

AUTO_DETECT_PROMPT = """
You are a professional translator.
Your task is to detect the source language of the text below and translate it precisely into **{target_lang}**.

Respond with strict JSON only, exactly in this shape:
{{"detectedLang": "<two-letter ISO 639-1 code of the source language>", "translation": "<translated text>"}}

Do not wrap the JSON in markdown code fences. Do not add explanations, comments, or any other text.

Text:
{quoted_text}
""".strip()

EXPLICIT_SOURCE_PROMPT = """
You are a professional translator.
Your task is to translate the text below from **{source_lang}** to **{target_lang}**.

Do not attempt to detect or guess any other language.
Respond with strict JSON only, exactly in this shape:
{{"translation": "<translated text>"}}

Do not wrap the JSON in markdown code fences. Do not add explanations, comments, or any other text.

Text:
{quoted_text}
""".strip()


def _quote(text: str) -> str:
    # JSON string literal: escapes quotes and backslashes, keeps non-ASCII as-is.
    return json.dumps(text, ensure_ascii=False)


def build_prompt(
    text: str,
    target_lang: Lang,
    source_lang: Lang | None,
    auto_detect: bool,
) -> str:
    """Render the provider prompt for one translation request."""
    if auto_detect:
        return AUTO_DETECT_PROMPT.format(
            target_lang=target_lang.value,
            quoted_text=_quote(text),
        )
    if source_lang is None:
        raise ValueError("source_lang is required when auto_detect is False")
    return EXPLICIT_SOURCE_PROMPT.format(
        source_lang=source_lang.value,
        target_lang=target_lang.value,
        quoted_text=_quote(text),
    )
