"""Health check endpoint — no store access, always available."""

from fastapi import APIRouter

from blogrepo.config import get_settings
from blogrepo.infrastructure.dependencies import get_article_cache

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status and cache occupancy."""
    settings = get_settings()
    cache = get_article_cache()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "article_cache": {"size": len(cache), "capacity": cache.capacity},
    }
