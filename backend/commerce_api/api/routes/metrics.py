"""Metrics Routes — dashboard counters (read-only)."""

from fastapi import APIRouter, Depends

from commerce_api.api.dependencies import get_commerce_service
from commerce_api.schemas.commerce import MetricsResponse
from commerce_api.services.commerce_service import CommerceService

router = APIRouter(prefix="/api/metrics", tags=["metrics"])


@router.get("", response_model=MetricsResponse)
def get_metrics(service: CommerceService = Depends(get_commerce_service)):
    """Current counters. Reading them is not itself counted as an API call."""
    return MetricsResponse(**service.get_metrics().as_dict())
