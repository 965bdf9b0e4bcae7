"""Subscription Service — accepts newsletter signups and forwards them to Loops.

Invariants:
    - accept() counts one api_call and answers immediately; it never calls the provider
    - deliver() runs after the response (BackgroundTasks) and never raises:
      provider failures are logged with their error code
    - Without a configured provider, delivery is skipped with a warning

Design Decisions:
    - Fire-and-forget delivery after the response
      (no retry queue, no dead-letter store; LoopsClient retries transient failures inline)
    - Email syntax already validated by SubscribeRequest (EmailStr) before we get here
"""

import logging

from commerce_api.core.domain_types import MetricName
from commerce_api.core.errors import ErrorContext, MailingListError
from commerce_api.core.metrics_store import MetricsStore
from commerce_api.infrastructure.mailing_list import LoopsClient, SignupReceipt
from commerce_api.schemas.subscription import SubscribeResponse

logger = logging.getLogger(__name__)

ACCEPTED_MESSAGE = "Thanks for subscribing!"


class SubscriptionService:
    def __init__(self, metrics: MetricsStore, provider: LoopsClient | None = None):
        self._metrics = metrics
        self._provider = provider

    @property
    def provider_configured(self) -> bool:
        return self._provider is not None

    def accept(self, email: str, user_group: str) -> SubscribeResponse:
        """Record the signup request and build the immediate response."""
        self._metrics.increment(MetricName.API_CALLS)
        logger.info(
            "Subscription accepted", extra={"user_group": user_group},
        )
        return SubscribeResponse(success=True, message=ACCEPTED_MESSAGE)

    async def deliver(self, email: str, user_group: str) -> SignupReceipt | None:
        """Background task: hand the signup to the mailing-list provider."""
        if self._provider is None:
            logger.warning("Loops form id not configured; subscription not forwarded")
            return None
        try:
            receipt = await self._provider.add_subscriber(
                email, user_group,
                context=ErrorContext(debug_info={"user_group": user_group}),
            )
        except MailingListError as e:
            logger.error(
                f"Subscription delivery failed: {e.message}",
                extra={"error_code": e.code, "user_group": user_group},
            )
            return None
        if not receipt.success:
            logger.warning(
                f"Loops rejected subscription: {receipt.message}",
                extra={"user_group": user_group},
            )
        return receipt
