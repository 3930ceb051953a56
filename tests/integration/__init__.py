"""
Integration tests for the Redis feature store.

Test components together against a real Redis server (database 15):
- Key layout compatibility
- WATCH/MULTI/EXEC races between separate connection pools
- Caching wrapper over the real core
- Big Segment lookups
"""
