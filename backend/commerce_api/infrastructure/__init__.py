"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - All external HTTP calls wrapped with timeout and error mapping
    - Clients are created in the app lifespan and closed at shutdown

Design Decisions:
    - Resilient wrappers over raw httpx clients (single responsibility)
"""
