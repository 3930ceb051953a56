"""Prometheus metrics for the Redis feature store.

Metrics live in the default registry; expose them with
prometheus_client.start_http_server() or the host application's /metrics.
Alert rules should be configured for:
- store_errors_total (Redis unreachable or returning malformed data)
- store_upsert_conflicts_total (sustained contention on a collection)
"""

from prometheus_client import Counter

# === Optimistic Concurrency Metrics ===

store_upsert_conflicts_total = Counter(
    "store_upsert_conflicts_total",
    "Upsert attempts retried because the watched collection changed",
    ["namespace"],
)
"""
Optimistic-concurrency retries by collection namespace.

Labels:
- namespace: features, segments, ...

A steady non-zero rate means several writers update the same collection
at once; bursts during flag rollouts are expected.
"""

store_stale_writes_total = Counter(
    "store_stale_writes_total",
    "Upserts ignored because the stored version was the same or newer",
    ["namespace"],
)
"""
Stale write rejections by collection namespace.

Labels:
- namespace: features, segments, ...

Not an error: out-of-order delivery is made safe by dropping these writes.
"""

# === Backing Store Metrics ===

store_errors_total = Counter(
    "store_errors_total",
    "Redis failures surfaced to callers by operation",
    ["operation"],
)
"""
Backing-store failures by operation.

Labels:
- operation: get, get_all, init, upsert, initialized, get_membership, get_metadata

Alert thresholds:
- CRITICAL: any sustained rate (store unavailable)
"""

# === Cache Metrics ===

store_cache_requests_total = Counter(
    "store_cache_requests_total",
    "Cache lookups by region and result",
    ["region", "result"],
)
"""
Cache lookups by region.

Labels:
- region: item, all, initialized
- result: hit, miss
"""
