"""Shared FastAPI dependencies: database sessions, service injection.

The LLM provider and the Settings instance are created once during the
FastAPI lifespan and stored on app.state. All downstream code retrieves
them via Depends(), never by direct import.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from translation_api.core.config import Settings
from translation_api.db.postgres import get_async_session
from translation_api.db.translation_store import SqlTranslationStore, TranslationCacheStore
from translation_api.services.llm.base import LLMProvider
from translation_api.services.translate.service import TranslateService


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

async def get_db(
    session: AsyncSession = Depends(get_async_session),
) -> AsyncSession:
    """Yield an async database session."""
    return session


async def get_translation_store(
    db: AsyncSession = Depends(get_db),
) -> TranslationCacheStore:
    """Return a request-scoped translation store."""
    return SqlTranslationStore(db)


# ---------------------------------------------------------------------------
# Singletons, retrieved from app.state (set during lifespan)
# ---------------------------------------------------------------------------

def get_settings(request: Request) -> Settings:
    """Return the Settings instance built at startup."""
    return request.app.state.settings


def get_llm_provider(request: Request) -> LLMProvider:
    """Return the singleton LLM provider from app state."""
    return request.app.state.llm_provider


# ---------------------------------------------------------------------------
# Service constructors, wired via Depends()
# ---------------------------------------------------------------------------

async def get_translate_service(
    store: TranslationCacheStore = Depends(get_translation_store),
    llm: LLMProvider = Depends(get_llm_provider),
    settings: Settings = Depends(get_settings),
) -> TranslateService:
    """Return a TranslateService wired to the request's store."""
    return TranslateService(store=store, llm=llm, settings=settings)
