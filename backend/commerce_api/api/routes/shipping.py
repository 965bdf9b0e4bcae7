"""Shipping Routes — cost quotes.

Invariants:
    - Missing/non-numeric weight → 422 (schema); weight <= 0 → 400 (service)
"""

from fastapi import APIRouter, Depends

from commerce_api.api.dependencies import get_commerce_service
from commerce_api.schemas.commerce import CalculateShippingRequest, ShippingQuoteResponse
from commerce_api.services.commerce_service import CommerceService

router = APIRouter(prefix="/api/shipping", tags=["shipping"])


@router.post("/calculate", response_model=ShippingQuoteResponse)
def calculate_shipping(
    body: CalculateShippingRequest,
    service: CommerceService = Depends(get_commerce_service),
):
    """Quote shipping at a flat rate per unit of weight."""
    return service.calculate_shipping(body.weight)
