"""Health check endpoints."""
from datetime import datetime, timezone
from fastapi import APIRouter

from ..core.config import settings
from ..core.database import health_check_db

router = APIRouter(prefix="/api/health", tags=["Health"])

@router.get("")
async def health_check():
    """Liveness check; never touches external services"""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }

@router.get("/db")
async def database_health():
    """Database health check"""
    healthy = await health_check_db()
    return {
        "status": "ok" if healthy else "unhealthy",
        "database": "connected" if healthy else "unreachable",
        "version": settings.app_version,
    }
