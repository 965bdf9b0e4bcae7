"""Order Routes — order creation.

Invariants:
    - Missing/ill-typed fields → 422 (schema); quantity <= 0 → 400 (service)
"""

from fastapi import APIRouter, Depends

from commerce_api.api.dependencies import get_commerce_service
from commerce_api.schemas.commerce import CreateOrderRequest, OrderResponse
from commerce_api.services.commerce_service import CommerceService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderResponse)
def create_order(
    body: CreateOrderRequest,
    service: CommerceService = Depends(get_commerce_service),
):
    """Create an order with status "created"."""
    return service.create_order(body.product, body.quantity)
