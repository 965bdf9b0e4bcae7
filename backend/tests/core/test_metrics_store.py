"""Metrics Store — verifies counter semantics and thread safety.

Tests:
    - Counters start at zero; products seeded from the constructor
    - increment returns the new value; negative amounts rejected
    - Concurrent increments from many threads are never lost
    - close() returns the final snapshot and marks the store closed
    - Writes after close() are rejected, reads still work
"""

import threading

import pytest

from commerce_api.core.domain_types import MetricName
from commerce_api.core.metrics_store import MetricsSnapshot, MetricsStore


def test_new_store_starts_at_zero():
    store = MetricsStore(products=10)
    assert store.snapshot() == MetricsSnapshot(
        products=10, orders=0, users=0, api_calls=0,
    )


def test_increment_returns_new_value():
    store = MetricsStore()
    assert store.increment(MetricName.ORDERS) == 1
    assert store.increment(MetricName.ORDERS, 4) == 5
    assert store.get(MetricName.ORDERS) == 5


def test_increment_rejects_negative_amount():
    store = MetricsStore()
    with pytest.raises(ValueError):
        store.increment(MetricName.API_CALLS, -1)
    assert store.get(MetricName.API_CALLS) == 0


def test_counters_are_independent():
    store = MetricsStore()
    store.increment(MetricName.USERS)
    store.increment(MetricName.API_CALLS, 3)
    snap = store.snapshot()
    assert snap.users == 1
    assert snap.api_calls == 3
    assert snap.orders == 0


def test_snapshot_as_dict_uses_metric_names():
    store = MetricsStore(products=10)
    store.increment(MetricName.API_CALLS)
    assert store.snapshot().as_dict() == {
        "products": 10, "orders": 0, "users": 0, "api_calls": 1,
    }


def test_concurrent_increments_are_not_lost():
    store = MetricsStore()
    threads_n, per_thread = 16, 1000

    def worker():
        for _ in range(per_thread):
            store.increment(MetricName.API_CALLS)

    threads = [threading.Thread(target=worker) for _ in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.get(MetricName.API_CALLS) == threads_n * per_thread


def test_close_returns_final_snapshot():
    store = MetricsStore(products=10)
    store.increment(MetricName.ORDERS, 2)
    assert not store.closed

    final = store.close()

    assert final.orders == 2
    assert store.closed


def test_increment_after_close_rejected():
    store = MetricsStore(products=10)
    store.increment(MetricName.API_CALLS)
    store.close()

    with pytest.raises(RuntimeError):
        store.increment(MetricName.API_CALLS)

    assert store.snapshot().api_calls == 1
