"""Health check endpoints.

Public endpoints for service health monitoring.
"""

from datetime import datetime

from fastapi import APIRouter

from api.models import HealthResponse
from password_checker import get_weak_passwords


router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Password Strength Advisor API"}


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Detailed health check.

    An empty dictionary is reported as degraded: scoring still works but
    falls back to length-only similarity.
    """
    entries = len(get_weak_passwords())
    return HealthResponse(
        status="healthy" if entries else "degraded",
        timestamp=datetime.now().isoformat(),
        dictionary_entries=entries,
    )
