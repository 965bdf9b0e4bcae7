"""Shipping — pure cost computation.

Invariants:
    - cost == weight * SHIPPING_RATE_PER_UNIT exactly (no rounding)
    - weight <= 0 raises InvalidWeightError before any computation
    - cost is always finite; a weight whose cost overflows raises WeightOutOfRangeError
"""

import math

from commerce_api.core.domain_types import SHIPPING_RATE_PER_UNIT
from commerce_api.core.errors import InvalidWeightError, WeightOutOfRangeError


def compute_shipping_cost(weight: float) -> float:
    """Shipping cost for a parcel of the given weight. Pure, no IO."""
    if weight <= 0:
        raise InvalidWeightError(weight)
    cost = weight * SHIPPING_RATE_PER_UNIT
    if not math.isfinite(cost):
        raise WeightOutOfRangeError(weight)
    return cost
