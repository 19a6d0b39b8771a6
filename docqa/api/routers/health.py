"""
Health check API endpoint.

Routes: GET /health

Dependencies: fastapi
System role: Liveness probe
"""

from fastapi import APIRouter

from docqa.models.api import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="ok", message="Service is running.")
