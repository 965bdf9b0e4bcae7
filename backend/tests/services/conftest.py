"""Service test fixtures — fresh services per test + FastAPI test clients.

Invariants:
    - Every test gets its own MetricsStore (counters start at zero, products = 10)
    - Service dependencies overridden on the app; overrides cleared on teardown
    - loops_requests records every call the fake mailing-list provider receives

Design Decisions:
    - httpx ASGITransport does not run the lifespan, so app.state is never
      populated in route tests; dependency overrides supply the services instead
    - Background tasks complete before ASGITransport returns, so delivery side
      effects can be asserted right after the response
"""

import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from commerce_api.api.dependencies import (
    get_commerce_service, get_subscription_service,
)
from commerce_api.core.catalog import catalog_size
from commerce_api.core.metrics_store import MetricsStore
from commerce_api.infrastructure.api_client import CommerceApiClient
from commerce_api.infrastructure.mailing_list import LoopsClient
from commerce_api.main import app
from commerce_api.services.commerce_service import CommerceService
from commerce_api.services.subscription_service import SubscriptionService


@pytest.fixture
def metrics_store():
    return MetricsStore(products=catalog_size())


@pytest.fixture
def commerce_service(metrics_store):
    return CommerceService(metrics_store)


@pytest.fixture
def loops_requests():
    return []


@pytest.fixture
def loops_responses():
    """Queue of (status, body) the fake provider answers with; default 200 success."""
    return []


@pytest.fixture
async def loops_client(loops_requests, loops_responses):
    def handler(request: httpx.Request) -> httpx.Response:
        loops_requests.append({
            "path": request.url.path,
            "json": json.loads(request.content),
        })
        if loops_responses:
            status, body = loops_responses.pop(0)
        else:
            status, body = 200, {"success": True, "id": "sub_123"}
        return httpx.Response(status, json=body)

    client = LoopsClient(
        base_url="https://loops.test",
        form_id="form-1",
        max_retries=2,
        base_delay_ms=0,
        max_delay_ms=0,
        transport=httpx.MockTransport(handler),
    )
    yield client
    await client.aclose()


@pytest.fixture
def subscription_service(metrics_store):
    return SubscriptionService(metrics_store)


@pytest.fixture
def overridden_app(commerce_service, subscription_service):
    app.dependency_overrides[get_commerce_service] = lambda: commerce_service
    app.dependency_overrides[get_subscription_service] = lambda: subscription_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(overridden_app):
    """FastAPI test client with service dependencies overridden."""
    async with AsyncClient(
        transport=ASGITransport(app=overridden_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def api_client(overridden_app):
    """CommerceApiClient wired straight into the ASGI app."""
    async with CommerceApiClient(
        base_url="http://test", transport=ASGITransport(app=overridden_app),
    ) as c:
        yield c
