"""Health check endpoint."""

from fastapi import APIRouter

from ..config import settings
from ..services.schedule_store import get_schedule_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Return service health status and schedule store reachability."""
    store_available = await get_schedule_store().is_available()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "schedule_store": "available" if store_available else "unavailable",
    }
