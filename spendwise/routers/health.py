from datetime import datetime

from fastapi import APIRouter

from spendwise.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Liveness check for the analysis API."""
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "timestamp": datetime.utcnow().isoformat()
    }
