"""Commerce API Client — typed httpx bridge for consumers of the API (dashboard actions).

Invariants:
    - Every call returns ApiResult (ApiSuccess XOR ApiFailure); HTTP errors,
      transport errors and malformed responses never raise
    - Inputs are validated first; invalid input returns ApiFailure with field
      errors and sends no request
    - The server's "error" string is propagated unchanged so it can be shown to the user
    - subscribe() returns SubscribeResult {success, message?, error?}

Design Decisions:
    - Base URL, API key and timeout from Settings (API_BASE_URL, default :4400)
    - transport parameter: tests point the client at the ASGI app or a MockTransport
"""

import logging
from dataclasses import dataclass
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from commerce_api.config import Settings
from commerce_api.core.api_result import ApiFailure, ApiResult, ApiSuccess
from commerce_api.core.errors import summarize_validation_errors
from commerce_api.schemas.actions import (
    CalculateShippingInput, CreateOrderInput, SearchProductsInput,
)
from commerce_api.schemas.commerce import (
    MetricsResponse, OrderResponse, SearchProductsResponse,
    ShippingQuoteResponse, UserResponse,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

SUBSCRIBE_FAILED = "Failed to subscribe"


@dataclass(frozen=True)
class SubscribeResult:
    success: bool
    message: str | None = None
    error: str | None = None


class CommerceApiClient:
    """Async client for the commerce API. Use as an async context manager."""

    def __init__(
        self,
        base_url: str = "http://localhost:4400",
        api_key: str | None = None,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            headers=headers,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None,
    ) -> "CommerceApiClient":
        return cls(
            base_url=settings.api_base_url,
            api_key=settings.api_key,
            timeout_seconds=settings.api_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "CommerceApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    # --- Operations ----------------------------------------------------------

    async def search_products(self, query: str) -> ApiResult[SearchProductsResponse]:
        parsed = _validate_input(SearchProductsInput, query=query)
        if isinstance(parsed, ApiFailure):
            return parsed
        return await self._request(
            "POST", "/api/products/search", SearchProductsResponse,
            json=parsed.model_dump(),
        )

    async def create_order(
        self, product: str, quantity: int,
    ) -> ApiResult[OrderResponse]:
        parsed = _validate_input(CreateOrderInput, product=product, quantity=quantity)
        if isinstance(parsed, ApiFailure):
            return parsed
        return await self._request(
            "POST", "/api/orders", OrderResponse, json=parsed.model_dump(),
        )

    async def calculate_shipping(self, weight: float) -> ApiResult[ShippingQuoteResponse]:
        parsed = _validate_input(CalculateShippingInput, weight=weight)
        if isinstance(parsed, ApiFailure):
            return parsed
        return await self._request(
            "POST", "/api/shipping/calculate", ShippingQuoteResponse,
            json=parsed.model_dump(),
        )

    async def get_user(self, user_id: str | None = None) -> ApiResult[UserResponse]:
        body = {"user_id": user_id} if user_id is not None else {}
        return await self._request("POST", "/api/users", UserResponse, json=body)

    async def get_metrics(self) -> ApiResult[MetricsResponse]:
        return await self._request("GET", "/api/metrics", MetricsResponse)

    async def subscribe(self, email: str, user_group: str) -> SubscribeResult:
        """Newsletter signup. Never raises; failures come back as success=False."""
        try:
            response = await self.client.post(
                "/api/subscribe", json={"email": email, "user_group": user_group},
            )
        except httpx.HTTPError as e:
            logger.warning(f"Subscribe request failed: {e}")
            return SubscribeResult(success=False, error=str(e) or SUBSCRIBE_FAILED)

        data = _json_or_empty(response)
        if not response.is_success:
            return SubscribeResult(
                success=False, error=data.get("error") or SUBSCRIBE_FAILED,
            )
        return SubscribeResult(success=True, message=data.get("message"))

    # --- Plumbing ------------------------------------------------------------

    async def _request(
        self, method: str, path: str, model: type[M], json: dict | None = None,
    ) -> ApiResult[M]:
        try:
            response = await self.client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            return ApiFailure(error=f"Request failed: {e}")

        if not response.is_success:
            data = _json_or_empty(response)
            fields = data.get("fields")
            return ApiFailure(
                error=data.get("error")
                or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                fields=fields if isinstance(fields, dict) else {},
            )

        try:
            return ApiSuccess(model.model_validate(response.json()))
        except (ValueError, ValidationError) as e:
            logger.error(f"{method} {path} returned an unexpected body: {e}")
            return ApiFailure(
                error="Invalid response from API", status_code=response.status_code,
            )


def _validate_input(model: type[M], **values) -> M | ApiFailure:
    try:
        return model(**values)
    except ValidationError as e:
        summary, fields = summarize_validation_errors(e.errors())
        return ApiFailure(error=summary, fields=fields)


def _json_or_empty(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
