"""Integration test fixtures (service checks and prerequisites).

Provides fixtures for checking if external services are available.
Integration tests are skipped if required services are not running.
"""

import pytest
from redis import Redis

from redis_feature_store.config import Settings

REDIS_TEST_URL = "redis://localhost:6379/15"  # Test database


@pytest.fixture(scope="session")
def check_redis():
    """Check if Redis is available at localhost:6379.
    
    Skips tests if Redis is not reachable.
    """
    try:
        client = Redis.from_url(REDIS_TEST_URL)
        client.ping()
        client.close()
    except Exception as e:
        pytest.skip(f"Redis not available: {e}")


@pytest.fixture
def real_redis_client(check_redis):
    """Real Redis client instance for integration tests (sync).
    
    Requires Redis to be running (checked by check_redis fixture).
    Uses database 15 (test database).
    """
    client = Redis.from_url(REDIS_TEST_URL, decode_responses=True)
    
    # Clear test database before test
    client.flushdb()
    
    yield client
    
    # Clear test database after test
    client.flushdb()
    client.close()


@pytest.fixture
def integration_settings(real_redis_client) -> Settings:
    """Settings pointing at the local test database."""
    return Settings(
        _env_file=None,
        REDIS_URL="redis://localhost:6379",
        REDIS_DATABASE=15,
        REDIS_PREFIX="integration",
        CACHE_TTL_SECONDS=30,
    )
