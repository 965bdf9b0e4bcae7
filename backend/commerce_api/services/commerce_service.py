"""Commerce Service — product search, orders, shipping quotes, users, metrics.

Invariants:
    - Every operation except get_metrics counts one api_call, even when it then
      fails a domain rule (the call reached the handler)
    - create_order always returns a fresh UUID4 order_id and status "created"
    - get_user increments users only when it generates a new id
    - get_metrics is read-only: observing metrics is not an API call

Design Decisions:
    - MetricsStore injected in the constructor, no ambient singleton
    - Synchronous methods: no IO, FastAPI runs the sync routes in its threadpool
    - Domain range checks (quantity, weight) here, shape checks in schemas
"""

import logging
import uuid

from commerce_api.core.catalog import search_catalog
from commerce_api.core.domain_types import (
    DEFAULT_USER_EMAIL, MetricName, OrderId, OrderStatus, UserId,
)
from commerce_api.core.errors import InvalidQuantityError
from commerce_api.core.metrics_store import MetricsSnapshot, MetricsStore
from commerce_api.core.shipping import compute_shipping_cost
from commerce_api.schemas.commerce import (
    OrderResponse, Product, SearchProductsResponse, ShippingQuoteResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)


class CommerceService:
    """Stateless handlers over a shared, injected metrics store."""

    def __init__(self, metrics: MetricsStore):
        self._metrics = metrics

    def _track_api_call(self) -> None:
        self._metrics.increment(MetricName.API_CALLS)

    def search_products(self, query: str) -> SearchProductsResponse:
        """Search the fixed catalog. Echoes query unchanged."""
        self._track_api_call()
        matches = search_catalog(query)
        logger.info(f"Product search '{query}' matched {len(matches)} item(s)")
        return SearchProductsResponse(
            query=query,
            results=[
                Product(
                    id=p.id, name=p.name,
                    price=p.price, description=p.description,
                )
                for p in matches
            ],
        )

    def create_order(self, product: str, quantity: int) -> OrderResponse:
        """Create an order. Raises InvalidQuantityError when quantity <= 0."""
        self._track_api_call()
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        order_id = OrderId(str(uuid.uuid4()))
        self._metrics.increment(MetricName.ORDERS)
        logger.info(
            f"Order created for product '{product}' x{quantity}",
            extra={"order_id": order_id},
        )
        return OrderResponse(
            order_id=order_id, product=product, status=OrderStatus.CREATED.value,
        )

    def calculate_shipping(self, weight: float) -> ShippingQuoteResponse:
        """Quote shipping. Raises InvalidWeightError when weight <= 0."""
        self._track_api_call()
        cost = compute_shipping_cost(weight)
        logger.info(f"Shipping quote: weight={weight} cost={cost}")
        return ShippingQuoteResponse(weight=weight, cost=cost)

    def get_user(self, user_id: str | None = None) -> UserResponse:
        """Look up a user, or register a new one when user_id is absent."""
        self._track_api_call()
        if user_id is None:
            resolved = UserId(str(uuid.uuid4()))
            self._metrics.increment(MetricName.USERS)
            logger.info("Registered new user", extra={"user_id": resolved})
        else:
            resolved = UserId(user_id)
            logger.info("Looked up user", extra={"user_id": resolved})
        return UserResponse(
            id=resolved, name=f"User {resolved}", email=DEFAULT_USER_EMAIL,
        )

    def get_metrics(self) -> MetricsSnapshot:
        """Current counters. Does not count as an API call."""
        return self._metrics.snapshot()
