"""Subscribe Route — verifies immediate response and background delivery.

Invariants:
    - 200 {success: true, message} returned without waiting on the provider
    - Invalid email / missing user group → 422
    - Provider failures never change the response

Design Decisions:
    - Background tasks run before ASGITransport returns, so delivery is
      asserted right after the response
"""

import pytest

from commerce_api.main import app
from commerce_api.api.dependencies import get_subscription_service
from commerce_api.services.subscription_service import SubscriptionService


@pytest.fixture
def with_provider(client, metrics_store, loops_client):
    """Swap in a subscription service that forwards to the fake provider."""
    service = SubscriptionService(metrics_store, loops_client)
    app.dependency_overrides[get_subscription_service] = lambda: service
    return service


async def test_subscribe_success(client, metrics_store):
    res = await client.post(
        "/api/subscribe", json={"email": "ada@example.com", "user_group": "beta"},
    )
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Thanks for subscribing!"}
    assert metrics_store.snapshot().api_calls == 1


async def test_subscribe_accepts_camel_case(client):
    res = await client.post(
        "/api/subscribe", json={"email": "ada@example.com", "userGroup": "beta"},
    )
    assert res.status_code == 200


async def test_subscribe_invalid_email_is_422(client, metrics_store):
    res = await client.post(
        "/api/subscribe", json={"email": "not-an-email", "user_group": "beta"},
    )
    assert res.status_code == 422
    assert "email" in res.json()["fields"]
    assert metrics_store.snapshot().api_calls == 0


async def test_subscribe_missing_user_group_is_422(client):
    res = await client.post("/api/subscribe", json={"email": "ada@example.com"})
    assert res.status_code == 422


async def test_subscribe_forwards_to_provider(client, with_provider, loops_requests):
    res = await client.post(
        "/api/subscribe", json={"email": "ada@example.com", "userGroup": "beta"},
    )
    assert res.status_code == 200
    assert loops_requests == [{
        "path": "/api/newsletter-form/form-1",
        "json": {"email": "ada@example.com", "userGroup": "beta"},
    }]


async def test_provider_failure_does_not_change_response(
    client, with_provider, loops_responses,
):
    loops_responses.append((400, {"message": "Invalid email"}))

    res = await client.post(
        "/api/subscribe", json={"email": "ada@example.com", "userGroup": "beta"},
    )

    assert res.status_code == 200
    assert res.json()["success"] is True
