"""Translation cache store backed by the translations table.

The store only reads by exact key and appends; it never updates or deletes.
Every SQLAlchemy error is caught and re-raised as StorageError so the
API layer gets a structured error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from translation_api.core.exceptions import StorageError
from translation_api.models.translation import Translation
from translation_api.services.translate.types import TranslationRecord

logger = structlog.get_logger(__name__)


class TranslationCacheStore(ABC):
    """Key-based lookup and append-only insert of translation records."""

    @abstractmethod
    async def find_exact(
        self,
        source_lang: str,
        target_lang: str,
        source_text: str,
    ) -> Translation | None:
        """Return the newest record for the exact triple, or None."""
        ...

    @abstractmethod
    async def insert(self, record: TranslationRecord) -> Translation:
        """Persist a new record. Raises StorageError on failure."""
        ...


class SqlTranslationStore(TranslationCacheStore):
    """TranslationCacheStore over an AsyncSession.

    The session is request-scoped; commit/rollback is owned by
    get_async_session(). insert() flushes so write errors surface here.
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_exact(
        self,
        source_lang: str,
        target_lang: str,
        source_text: str,
    ) -> Translation | None:
        stmt = (
            select(Translation)
            .where(
                Translation.source_lang == source_lang,
                Translation.target_lang == target_lang,
                Translation.source_text == source_text,
            )
            .order_by(Translation.created_at.desc())
            .limit(1)
        )
        try:
            result = await self._db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(
                "translation_lookup_failed",
                source_lang=source_lang,
                target_lang=target_lang,
                error=str(e),
            )
            raise StorageError(f"Translation lookup failed: {e}") from e
        return result.scalars().first()

    async def insert(self, record: TranslationRecord) -> Translation:
        row = Translation(
            source_lang=record.source_lang,
            target_lang=record.target_lang,
            source_text=record.source_text,
            translated_text=record.translated_text,
            detected_source_lang=record.detected_source_lang,
            provider=record.provider,
            model=record.model,
            status=record.status.value,
        )
        self._db.add(row)
        try:
            await self._db.flush()
        except SQLAlchemyError as e:
            logger.error(
                "translation_insert_failed",
                source_lang=record.source_lang,
                target_lang=record.target_lang,
                status=record.status.value,
                error=str(e),
            )
            raise StorageError(f"Translation insert failed: {e}") from e
        return row
