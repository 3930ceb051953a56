"""
Redis-backed persistent data store for a feature flag SDK.

Stores versioned feature flags and segments in Redis and keeps an in-process
read-through cache consistent with it:
- Store core with optimistic (WATCH/MULTI/EXEC) versioned upserts
- Read-only Big Segment membership store
- Caching wrapper with disabled, TTL and cache-forever modes

Architecture: redis-py connection pool + store core + caching wrapper
"""

__version__ = "0.1.0"
