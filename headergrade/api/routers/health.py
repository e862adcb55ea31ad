"""Health check endpoints for service monitoring."""

from datetime import UTC, datetime

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health", response_model=dict[str, str])
async def simple_health_check() -> dict[str, str]:
    """Simple health check that always returns OK if service is running."""
    return {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}
