"""Liveness endpoint with a database connectivity probe."""

from fastapi import APIRouter

from translation_api.db.postgres import ping_postgres
from translation_api.schemas.translate import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    database_ok = await ping_postgres()
    return HealthResponse(
        status="ok",
        database="ok" if database_ok else "unavailable",
    )
