"""Domain Types — rich types and constants shared across the commerce API.

Invariants:
    - OrderId, UserId, ProductId wrap str — ids cross the wire as strings
    - SHIPPING_RATE_PER_UNIT is fixed at 3.0 (cost = weight * rate)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", str)
UserId = NewType("UserId", str)
ProductId = NewType("ProductId", str)


# ─── Constants ───────────────────────────────────────────────────

SHIPPING_RATE_PER_UNIT = 3.0
DEFAULT_USER_EMAIL = "user@example.com"

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


# ─── Enums ───────────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Order lifecycle — creation is the only transition in this API."""
    CREATED = "created"


class MetricName(str, Enum):
    """Counters tracked by MetricsStore. Values double as response keys."""
    PRODUCTS = "products"
    ORDERS = "orders"
    USERS = "users"
    API_CALLS = "api_calls"
