"""Health and readiness endpoints."""
from fastapi import APIRouter, Request

from pathecho import __version__
from pathecho.core.settings import Settings

router = APIRouter()


@router.get("/health", tags=["meta"])  # simple health
async def health(request: Request) -> dict[str, object]:
    settings: Settings = request.app.state.settings
    return {
        "status": "ok",
        "environment": settings.environment,
        "debug": settings.debug,
        "version": __version__,
    }
