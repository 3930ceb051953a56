"""
Unit tests for the Redis feature store.

Test individual components in isolation:
- Data models (serialization, validation, immutability)
- Key scheme and connection pool construction
- Store core (commands issued, error translation, optimistic retries)
- Big Segment store
- Caching wrapper consistency contract and expiring mapping
"""
