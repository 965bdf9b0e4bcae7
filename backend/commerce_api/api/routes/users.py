"""User Routes — lookup or registration.

Invariants:
    - The request body is optional; no body behaves like {}
"""

from fastapi import APIRouter, Depends

from commerce_api.api.dependencies import get_commerce_service
from commerce_api.schemas.commerce import GetUserRequest, UserResponse
from commerce_api.services.commerce_service import CommerceService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
def get_user(
    body: GetUserRequest | None = None,
    service: CommerceService = Depends(get_commerce_service),
):
    """Echo the given user_id, or register a user with a fresh UUID."""
    user_id = body.user_id if body else None
    return service.get_user(user_id)
