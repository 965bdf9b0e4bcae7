"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, response payloads)
    - Request schemas check shape only; domain rules live in services/core

Design Decisions:
    - One module per concern: commerce (catalog/orders/shipping/users/metrics),
      subscription, system; actions holds client-side input checks
"""
