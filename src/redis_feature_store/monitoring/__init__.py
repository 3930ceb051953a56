"""Monitoring and metrics instrumentation for the Redis feature store.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from redis_feature_store.monitoring.metrics import (
    store_cache_requests_total,
    store_errors_total,
    store_stale_writes_total,
    store_upsert_conflicts_total,
)

__all__ = [
    "store_upsert_conflicts_total",
    "store_stale_writes_total",
    "store_errors_total",
    "store_cache_requests_total",
]
