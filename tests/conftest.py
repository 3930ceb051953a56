"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest

from fixtures.memory_redis import InMemoryRedis
from redis_feature_store.config import Settings
from redis_feature_store.models.items import VersionedItem


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.
    
    Settings are frozen; derive variants in individual tests:
        def test_something(test_settings):
            settings = test_settings.model_copy(update={"REDIS_PREFIX": "other"})
    """
    return Settings(
        _env_file=None,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        REDIS_URL="redis://localhost:6379",
        REDIS_PREFIX="test",
        REDIS_MAX_CONNECTIONS=4,
        CACHE_TTL_SECONDS=30,
    )


@pytest.fixture
def memory_redis() -> InMemoryRedis:
    """Fresh in-memory Redis double."""
    return InMemoryRedis()


@pytest.fixture
def make_item():
    """Factory fixture to create VersionedItem with an optional payload.
    
    Usage:
        def test_something(make_item):
            flag = make_item("flagA", 2, on=True)
    """
    def _create(key: str = "flagA", version: int = 1, deleted: bool = False, **payload) -> VersionedItem:
        return VersionedItem(key=key, version=version, deleted=deleted, **payload)
    
    return _create
