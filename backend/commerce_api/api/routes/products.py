"""Product Routes — catalog search."""

from fastapi import APIRouter, Depends

from commerce_api.api.dependencies import get_commerce_service
from commerce_api.schemas.commerce import SearchProductsRequest, SearchProductsResponse
from commerce_api.services.commerce_service import CommerceService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.post(
    "/search", response_model=SearchProductsResponse,
    response_model_exclude_none=True,
)
def search_products(
    body: SearchProductsRequest,
    service: CommerceService = Depends(get_commerce_service),
):
    """Search products by name. Empty queries are rejected with 422."""
    return service.search_products(body.query)
