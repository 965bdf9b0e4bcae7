"""Route Dependencies — hand the lifespan-owned services to route handlers.

Invariants:
    - Services live on app.state, created once per application lifespan
    - Routes receive services only through these functions (tests override them)
"""

from fastapi import Request

from commerce_api.services.commerce_service import CommerceService
from commerce_api.services.subscription_service import SubscriptionService


def get_commerce_service(request: Request) -> CommerceService:
    return request.app.state.commerce_service


def get_subscription_service(request: Request) -> SubscriptionService:
    return request.app.state.subscription_service
