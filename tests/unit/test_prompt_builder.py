"""Unit tests for build_prompt().

Tests:
  - auto-detect template asks for detectedLang + translation JSON
  - explicit template names both languages and asks for translation-only JSON
  - both templates forbid markdown fences
  - embedded quotes are escaped, non-ASCII text kept readable
  - explicit mode without a source language is refused
"""

from __future__ import annotations

import pytest

from translation_api.core.languages import Lang
from translation_api.services.translate.prompt_builder import build_prompt


class TestAutoDetectPrompt:
    def test_requests_detection_and_target(self) -> None:
        prompt = build_prompt("Hello world", Lang.TR, None, auto_detect=True)
        assert "detect the source language" in prompt
        assert "**TR**" in prompt
        assert '"detectedLang"' in prompt
        assert '"translation"' in prompt

    def test_forbids_code_fences(self) -> None:
        prompt = build_prompt("Hello world", Lang.TR, None, auto_detect=True)
        assert "Do not wrap the JSON in markdown code fences" in prompt

    def test_text_is_quoted(self) -> None:
        prompt = build_prompt("Hello world", Lang.TR, None, auto_detect=True)
        assert prompt.endswith('Text:\n"Hello world"')


class TestExplicitPrompt:
    def test_names_source_and_target(self) -> None:
        prompt = build_prompt("Hello world", Lang.TR, Lang.EN, auto_detect=False)
        assert "from **EN** to **TR**" in prompt
        assert "Do not attempt to detect or guess any other language." in prompt
        assert '{"translation": "<translated text>"}' in prompt
        assert "detectedLang" not in prompt

    def test_forbids_code_fences(self) -> None:
        prompt = build_prompt("Hello world", Lang.TR, Lang.EN, auto_detect=False)
        assert "Do not wrap the JSON in markdown code fences" in prompt

    def test_requires_source_lang(self) -> None:
        with pytest.raises(ValueError):
            build_prompt("Hello world", Lang.TR, None, auto_detect=False)


class TestTextEmbedding:
    def test_embedded_quotes_are_escaped(self) -> None:
        prompt = build_prompt('He said "hi"', Lang.DE, Lang.EN, auto_detect=False)
        assert prompt.endswith('Text:\n"He said \\"hi\\""')

    def test_non_ascii_kept_verbatim(self) -> None:
        prompt = build_prompt("Merhaba dünya", Lang.EN, Lang.TR, auto_detect=False)
        assert '"Merhaba dünya"' in prompt

    def test_braces_in_text_are_not_formatted(self) -> None:
        prompt = build_prompt("{target_lang} {0}", Lang.FR, None, auto_detect=True)
        assert '"{target_lang} {0}"' in prompt

    def test_templates_differ_by_mode(self) -> None:
        auto = build_prompt("x", Lang.FR, None, auto_detect=True)
        explicit = build_prompt("x", Lang.FR, Lang.EN, auto_detect=False)
        assert auto != explicit
