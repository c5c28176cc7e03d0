"""FastAPI application entrypoint.

All routes prefixed /v1. Auto-generated OpenAPI docs at /docs.

The Settings instance and the GeminiProvider are created once during the
lifespan and stored on app.state for injection via Depends().
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from translation_api.api.v1.health import router as health_router
from translation_api.api.v1.translate import router as translate_router
from translation_api.core.config import settings
from translation_api.core.exceptions import TranslatorError
from translation_api.db.postgres import close_postgres
from translation_api.services.llm.gemini import GeminiProvider


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    Creates the singleton LLM provider from the startup Settings and
    attaches both to app.state. Retrieved in request handlers via
    Depends() in translation_api/api/deps.py.
    """
    # --- Startup ---
    logger.info(
        "app_startup",
        env=settings.app_env,
        provider=settings.translation_provider,
        model=settings.gemini_model,
    )
    if not settings.gemini_api_key:
        logger.warning("gemini_api_key_not_configured")

    app.state.settings = settings
    app.state.llm_provider = GeminiProvider(settings=settings)

    logger.info("app_providers_ready")
    yield

    # --- Shutdown ---
    logger.info("app_shutdown")

    await app.state.llm_provider.aclose()
    await close_postgres()


app = FastAPI(
    title="Translation API",
    description="Text translation through Gemini with a PostgreSQL-backed cache and audit log.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: permissive for development, closed in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if not settings.is_production else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TranslatorError)
async def translator_error_handler(request: Request, exc: TranslatorError) -> JSONResponse:
    """Structured error response for all service exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


# Mount all v1 routers
app.include_router(health_router, prefix="/v1")
app.include_router(translate_router, prefix="/v1")
