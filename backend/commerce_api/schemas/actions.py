"""Action Input Schemas — client-side validation run before calling the API.

Invariants:
    - Stricter than the server schemas: quantity and weight must also be positive,
      so obviously bad input never leaves the caller
    - Messages are the ones shown next to form fields in the dashboard
"""

from pydantic import BaseModel, Field, field_validator


class SearchProductsInput(BaseModel):
    query: str = Field(strict=True)

    @field_validator("query")
    @classmethod
    def query_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Search query is required")
        return v


class CreateOrderInput(BaseModel):
    product: str = Field(strict=True)
    quantity: int = Field(strict=True)

    @field_validator("product")
    @classmethod
    def product_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name is required")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Quantity must be a positive integer")
        return v


class CalculateShippingInput(BaseModel):
    weight: float = Field(strict=True, allow_inf_nan=False)

    @field_validator("weight")
    @classmethod
    def weight_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Weight must be a positive number")
        return v
