"""Commerce Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Request models check SHAPE only (presence, type, non-empty); violations become 422
    - Range rules (quantity > 0, weight > 0) are domain rules enforced in the service (400)
    - SearchProductsRequest.query: at least 1 non-whitespace char; echoed back unchanged
    - GetUserRequest.user_id: blank or null means "absent" (a new id is generated)

Design Decisions:
    - strict=True on scalar fields: "2" is not a quantity, true is not a weight
    - field_validator for side-effect-free checks — keeps models pure
"""

from pydantic import BaseModel, Field, field_validator


# --- Products ----------------------------------------------------------------

class SearchProductsRequest(BaseModel):
    """Product search — empty or whitespace-only queries are rejected."""
    query: str = Field(min_length=1, strict=True)

    @field_validator("query")
    @classmethod
    def reject_blank_query(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Search query is required")
        return v


class Product(BaseModel):
    id: str
    name: str
    price: float | None = None
    description: str | None = None


class SearchProductsResponse(BaseModel):
    query: str
    results: list[Product]


# --- Orders ------------------------------------------------------------------

class CreateOrderRequest(BaseModel):
    """Order creation — product name required, quantity must be an integer."""
    product: str = Field(min_length=1, strict=True)
    quantity: int = Field(strict=True)

    @field_validator("product")
    @classmethod
    def reject_blank_product(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name is required")
        return v


class OrderResponse(BaseModel):
    order_id: str
    product: str
    status: str


# --- Shipping ----------------------------------------------------------------

class CalculateShippingRequest(BaseModel):
    """Shipping quote — weight must be a finite number (ints accepted)."""
    weight: float = Field(strict=True, allow_inf_nan=False)


class ShippingQuoteResponse(BaseModel):
    weight: float
    cost: float


# --- Users -------------------------------------------------------------------

class GetUserRequest(BaseModel):
    """User lookup — omit user_id to register a new user."""
    user_id: str | None = Field(None, strict=True)

    @field_validator("user_id")
    @classmethod
    def blank_means_absent(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


class UserResponse(BaseModel):
    id: str
    name: str
    email: str


# --- Metrics -----------------------------------------------------------------

class MetricsResponse(BaseModel):
    products: int
    orders: int
    users: int
    api_calls: int
