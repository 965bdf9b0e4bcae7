"""Subscription Schemas — newsletter signup request/response.

Invariants:
    - email must be syntactically valid (EmailStr); otherwise 422
    - user group accepted as either "user_group" or "userGroup", required, non-empty
"""

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator


class SubscribeRequest(BaseModel):
    email: EmailStr
    user_group: str = Field(
        min_length=1,
        strict=True,
        validation_alias=AliasChoices("user_group", "userGroup"),
    )

    @field_validator("user_group")
    @classmethod
    def strip_user_group(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user_group cannot be empty or whitespace")
        return v


class SubscribeResponse(BaseModel):
    success: bool
    message: str | None = None
