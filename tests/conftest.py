"""Shared pytest fixtures for the translation service test suite.

Provides:
  - mock_llm: Mock LLMProvider returning a configurable reply or raising
  - memory_store: In-memory TranslationCacheStore with call tracking
  - test_settings: Settings with a fake API key and fixed provider/model
  - test_db: Mock AsyncSession for SqlTranslationStore tests

All external service calls are mocked in every test; no real Gemini or
PostgreSQL usage.
"""

from __future__ import annotations

import itertools
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from translation_api.core.config import Settings
from translation_api.db.translation_store import TranslationCacheStore
from translation_api.models.translation import Translation
from translation_api.services.llm.base import LLMProvider
from translation_api.services.translate.types import TranslationRecord


# ---------------------------------------------------------------------------
# Mock LLM Provider
# ---------------------------------------------------------------------------


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing. Returns a fixed reply or raises."""

    def __init__(
        self,
        reply: str = '{"translation": "Mock translation"}',
        error: Exception | None = None,
    ) -> None:
        self._reply = reply
        self._error = error
        self.calls: list[dict[str, Any]] = []

    async def generate_content(
        self,
        prompt: str,
        model_override: str | None = None,
    ) -> str:
        self.calls.append({"prompt": prompt, "model_override": model_override})
        if self._error is not None:
            raise self._error
        return self._reply


# ---------------------------------------------------------------------------
# In-memory Translation Store
# ---------------------------------------------------------------------------


class InMemoryTranslationStore(TranslationCacheStore):
    """Append-only list of Translation rows with lookup/insert tracking."""

    def __init__(self) -> None:
        self.rows: list[Translation] = []
        self.lookups: list[tuple[str, str, str]] = []
        self.inserts: list[TranslationRecord] = []
        self._clock = itertools.count()
        self._epoch = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def seed(self, **fields: Any) -> Translation:
        """Add a row directly, bypassing insert() tracking."""
        defaults: dict[str, Any] = {
            "detected_source_lang": None,
            "provider": "Gemini",
            "model": "gemini-1.5-flash",
            "status": "SUCCESS",
        }
        defaults.update(fields)
        row = Translation(id=uuid.uuid4(), created_at=self._tick(), **defaults)
        self.rows.append(row)
        return row

    def _tick(self) -> datetime:
        return self._epoch + timedelta(seconds=next(self._clock))

    async def find_exact(
        self,
        source_lang: str,
        target_lang: str,
        source_text: str,
    ) -> Translation | None:
        self.lookups.append((source_lang, target_lang, source_text))
        matches = [
            r for r in self.rows
            if r.source_lang == source_lang
            and r.target_lang == target_lang
            and r.source_text == source_text
        ]
        if not matches:
            return None
        return max(matches, key=lambda r: r.created_at)

    async def insert(self, record: TranslationRecord) -> Translation:
        self.inserts.append(record)
        now = self._tick()
        row = Translation(
            id=uuid.uuid4(),
            source_lang=record.source_lang,
            target_lang=record.target_lang,
            source_text=record.source_text,
            translated_text=record.translated_text,
            detected_source_lang=record.detected_source_lang,
            provider=record.provider,
            model=record.model,
            status=record.status.value,
            created_at=now,
            updated_at=now,
        )
        self.rows.append(row)
        return row


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_llm() -> MockLLMProvider:
    """Mock LLM provider fixture replying with a plain JSON translation."""
    return MockLLMProvider()


@pytest.fixture
def memory_store() -> InMemoryTranslationStore:
    """Empty in-memory translation store."""
    return InMemoryTranslationStore()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a fake key; init kwargs beat .env and OS env."""
    return Settings(
        gemini_api_key="test-key",
        gemini_api_version="v1beta",
        gemini_model="gemini-1.5-flash",
        gemini_base_url="https://gemini.test",
        translation_provider="Gemini",
        provider_timeout_seconds=5.0,
    )


@pytest.fixture
def test_db() -> MagicMock:
    """Mock async database session exposing the AsyncSession calls the store uses."""
    session = MagicMock()
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.execute = AsyncMock()
    return session
