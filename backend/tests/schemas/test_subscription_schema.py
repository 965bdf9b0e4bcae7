"""Subscription Schema — verifies email syntax and user-group aliasing."""

import pytest
from pydantic import ValidationError

from commerce_api.schemas.subscription import SubscribeRequest, SubscribeResponse


def test_accepts_snake_case_user_group():
    req = SubscribeRequest.model_validate(
        {"email": "ada@example.com", "user_group": "beta"},
    )
    assert req.user_group == "beta"


def test_accepts_camel_case_user_group():
    req = SubscribeRequest.model_validate(
        {"email": "ada@example.com", "userGroup": "beta"},
    )
    assert req.user_group == "beta"


def test_user_group_is_stripped():
    req = SubscribeRequest.model_validate(
        {"email": "ada@example.com", "userGroup": "  beta  "},
    )
    assert req.user_group == "beta"


@pytest.mark.parametrize("email", ["", "not-an-email", "ada@", "@example.com"])
def test_invalid_email_rejected(email):
    with pytest.raises(ValidationError):
        SubscribeRequest.model_validate({"email": email, "userGroup": "beta"})


@pytest.mark.parametrize("payload", [
    {"email": "ada@example.com"},
    {"email": "ada@example.com", "userGroup": ""},
    {"email": "ada@example.com", "userGroup": "   "},
])
def test_user_group_required(payload):
    with pytest.raises(ValidationError):
        SubscribeRequest.model_validate(payload)


def test_long_user_group_accepted():
    req = SubscribeRequest.model_validate(
        {"email": "ada@example.com", "userGroup": "g" * 1000},
    )
    assert len(req.user_group) == 1000


def test_response_carries_only_success_and_message():
    res = SubscribeResponse(success=True)
    assert res.message is None
    assert set(SubscribeResponse.model_fields) == {"success", "message"}
