"""Resilient Loops Client — posts newsletter signups with retry, backoff, and error mapping.

Invariants:
    - Rate limits (429): exponential backoff with jitter, respects Retry-After header
    - Transient errors (5xx, connect, timeout): max `max_retries` retries with backoff
    - Client errors (4xx except 429): immediate failure, no retry
    - All failures mapped to MailingListError (core/errors.py)

Design Decisions:
    - Wrapper over a raw httpx.AsyncClient: isolates retry logic from the subscription service
    - ±25% jitter on backoff: prevents thundering herd against the provider
    - transport parameter: tests inject httpx.MockTransport, production uses the default
"""

import asyncio
import random
import logging
from dataclasses import dataclass

import httpx

from commerce_api.core.errors import MailingListError, ErrorContext

logger = logging.getLogger(__name__)

_RATE_LIMITED = 429


@dataclass(frozen=True)
class SignupReceipt:
    """What the provider told us about a signup."""
    success: bool
    message: str | None = None
    id: str | None = None


class LoopsClient:
    """Posts {email, userGroup} to the Loops newsletter form endpoint."""

    def __init__(
        self,
        base_url: str,
        form_id: str,
        max_retries: int = 3,
        base_delay_ms: int = 500,
        max_delay_ms: int = 8_000,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )
        self.form_id = form_id
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms

    async def aclose(self) -> None:
        await self.client.aclose()

    async def add_subscriber(
        self, email: str, user_group: str, context: ErrorContext | None = None,
    ) -> SignupReceipt:
        """Submit a signup, retrying transient failures."""
        path = f"/api/newsletter-form/{self.form_id}"
        payload = {"email": email, "userGroup": user_group}
        for attempt in range(self.max_retries + 1):
            try:
                response = await self.client.post(path, json=payload)
            except httpx.TransportError as e:  # includes timeouts
                await self._handle_transient_error(e, attempt, context)
                continue

            if response.status_code == _RATE_LIMITED:
                await self._handle_rate_limit(response, attempt, context)
                continue
            if response.status_code >= 500:
                await self._handle_transient_error(
                    f"HTTP {response.status_code}", attempt, context,
                )
                continue
            return self._parse_receipt(response, attempt, context)

        # Unreachable: the handlers raise on the final attempt
        raise MailingListError("retries exhausted", "unknown", context=context)

    def _parse_receipt(
        self, response: httpx.Response, attempt: int, context: ErrorContext | None,
    ) -> SignupReceipt:
        """Map a final (non-retryable) provider response to a receipt or error."""
        try:
            body = response.json()
        except ValueError:
            raise MailingListError(
                f"invalid JSON body (HTTP {response.status_code})",
                "invalid_response", context=context,
            )
        if not isinstance(body, dict):
            raise MailingListError(
                "unexpected response shape", "invalid_response", context=context,
            )
        if response.is_client_error:
            raise MailingListError(
                body.get("message") or f"HTTP {response.status_code}",
                "client_error", context=context,
            )
        success = body.get("success")
        if success is None:
            success = response.is_success
        logger.info(
            "Loops signup delivered",
            extra={"attempt": attempt + 1, "status_code": response.status_code},
        )
        return SignupReceipt(
            success=bool(success), message=body.get("message"), id=body.get("id"),
        )

    async def _handle_rate_limit(
        self, response: httpx.Response, attempt: int, context: ErrorContext | None,
    ) -> None:
        """Handle rate limit response with retry or raise."""
        retry_after_ms = self._extract_retry_after(response)
        if attempt >= self.max_retries:
            raise MailingListError(
                "Rate limit exceeded after retries",
                "rate_limit",
                retry_after_ms=retry_after_ms,
                context=context,
            )
        delay = retry_after_ms or self._backoff(attempt)
        logger.warning(
            f"Loops rate limit hit, retry after {delay}ms (attempt {attempt + 1})",
        )
        await asyncio.sleep(delay / 1000)

    async def _handle_transient_error(
        self, e: Exception | str, attempt: int, context: ErrorContext | None,
    ) -> None:
        """Handle transient errors with retry or raise."""
        if attempt >= self.max_retries:
            raise MailingListError(
                f"Transient failure after {self.max_retries} retries: {e}",
                "connection_error",
                context=context,
            )
        delay = self._backoff(attempt)
        logger.warning(f"Loops transient error, retry after {delay}ms: {e}")
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311

    def _extract_retry_after(self, response: httpx.Response) -> int | None:
        """Extract Retry-After header in seconds (returns milliseconds)."""
        val = response.headers.get("retry-after")
        if val and val.isdigit():
            return int(val) * 1000
        return None
