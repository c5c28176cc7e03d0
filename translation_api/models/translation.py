"""Translation record ORM model.

Rows are append-only: created once per cache miss, never updated or deleted
by the service. The (source_lang, target_lang, source_text) triple is the
cache key but carries no uniqueness constraint; concurrent identical misses
may each insert a row.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from translation_api.db.postgres import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Translation(Base):
    __tablename__ = "translations"
    __table_args__ = (
        Index("ix_translations_lang_pair", "source_lang", "target_lang"),
        Index("ix_translations_created_at", "created_at"),
        CheckConstraint("status IN ('SUCCESS', 'FAILED')", name="ck_translations_status"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    source_lang: Mapped[str] = mapped_column(Text, nullable=False)  # Lang code | 'AUTO'
    target_lang: Mapped[str] = mapped_column(Text, nullable=False)
    source_text: Mapped[str] = mapped_column(Text, nullable=False)
    translated_text: Mapped[str] = mapped_column(Text, nullable=False)
    detected_source_lang: Mapped[str | None] = mapped_column(Text, nullable=True)
    provider: Mapped[str] = mapped_column(Text, nullable=False)
    model: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)  # 'SUCCESS' | 'FAILED'
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )
