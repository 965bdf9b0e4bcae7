"""System Routes — root banner and liveness probe.

Invariants:
    - GET / and GET /health always return 200 while the process is up
    - Neither endpoint touches the metrics store
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from commerce_api.config import get_settings
from commerce_api.schemas.system import HealthResponse, RootResponse

router = APIRouter(tags=["general"])


@router.get("/", response_model=RootResponse, status_code=status.HTTP_200_OK)
async def root():
    """API banner with version and docs location."""
    settings = get_settings()
    return RootResponse(
        message=f"{settings.app_title} is running",
        version=settings.app_version,
        docs="/docs",
    )


@router.get(
    "/health", response_model=HealthResponse, tags=["health"],
    status_code=status.HTTP_200_OK,
)
async def health_check():
    """Liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=get_settings().app_version,
    )
