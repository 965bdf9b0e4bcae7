"""Subscribe Routes — newsletter signup.

Invariants:
    - Invalid email or missing user group → 422 before the service runs
    - Response is sent before the provider is contacted (BackgroundTasks)
"""

from fastapi import APIRouter, BackgroundTasks, Depends

from commerce_api.api.dependencies import get_subscription_service
from commerce_api.schemas.subscription import SubscribeRequest, SubscribeResponse
from commerce_api.services.subscription_service import SubscriptionService

router = APIRouter(prefix="/api/subscribe", tags=["subscription"])


@router.post("", response_model=SubscribeResponse, response_model_exclude_none=True)
async def subscribe(
    body: SubscribeRequest,
    background_tasks: BackgroundTasks,
    service: SubscriptionService = Depends(get_subscription_service),
):
    """Accept a signup; forward it to the mailing-list provider in the background."""
    response = service.accept(body.email, body.user_group)
    background_tasks.add_task(service.deliver, body.email, body.user_group)
    return response
