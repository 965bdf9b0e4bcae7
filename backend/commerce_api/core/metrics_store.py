"""Metrics Store — thread-safe, process-lifetime counters for dashboard metrics.

Invariants:
    - Counters only grow: increment() rejects negative amounts
    - Every read and write happens under one lock, so N concurrent increments
      always add exactly N (sync routes run in the threadpool)
    - snapshot() is a consistent view of all counters at one instant
    - After close(), increment() raises RuntimeError; reads still work

Design Decisions:
    - Owned by app.state and injected via dependencies, never a module-level singleton
    - threading.Lock over asyncio.Lock: callers run both on the event loop and in
      worker threads
    - products is seeded from the catalog size: the catalog is fixed for the process
"""

import threading
from dataclasses import dataclass

from commerce_api.core.domain_types import MetricName


@dataclass(frozen=True)
class MetricsSnapshot:
    products: int
    orders: int
    users: int
    api_calls: int

    def as_dict(self) -> dict[str, int]:
        return {
            MetricName.PRODUCTS.value: self.products,
            MetricName.ORDERS.value: self.orders,
            MetricName.USERS.value: self.users,
            MetricName.API_CALLS.value: self.api_calls,
        }


class MetricsStore:
    """Lock-guarded counters. One instance per running application."""

    def __init__(self, products: int = 0):
        self._lock = threading.Lock()
        self._counts: dict[MetricName, int] = {name: 0 for name in MetricName}
        self._counts[MetricName.PRODUCTS] = products
        self._closed = False

    def increment(self, name: MetricName, amount: int = 1) -> int:
        """Add amount to a counter and return its new value."""
        if amount < 0:
            raise ValueError("metrics counters are monotonic; amount must be >= 0")
        with self._lock:
            if self._closed:
                raise RuntimeError("metrics store is closed")
            self._counts[name] += amount
            return self._counts[name]

    def get(self, name: MetricName) -> int:
        with self._lock:
            return self._counts[name]

    def snapshot(self) -> MetricsSnapshot:
        with self._lock:
            return MetricsSnapshot(
                products=self._counts[MetricName.PRODUCTS],
                orders=self._counts[MetricName.ORDERS],
                users=self._counts[MetricName.USERS],
                api_calls=self._counts[MetricName.API_CALLS],
            )

    def close(self) -> MetricsSnapshot:
        """Mark the store closed at shutdown and return the final counts."""
        with self._lock:
            self._closed = True
        return self.snapshot()

    @property
    def closed(self) -> bool:
        return self._closed
