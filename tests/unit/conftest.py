"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without external dependencies.
"""

import pytest
from unittest.mock import MagicMock

from redis_feature_store.persistence.base_store import PersistentStoreCore


@pytest.fixture
def mock_redis():
    """Mock Redis client for unit tests (sync).
    
    ``mock_redis.pipe`` is the pipeline handed out by
    ``with mock_redis.pipeline() as pipe``.
    """
    mock = MagicMock()
    mock.hget.return_value = None
    mock.hgetall.return_value = {}
    mock.exists.return_value = 0
    mock.get.return_value = None
    mock.smembers.return_value = set()
    
    pipe = MagicMock()
    pipe.hget.return_value = None
    pipe.execute.return_value = [1]
    mock.pipeline.return_value.__enter__.return_value = pipe
    mock.pipe = pipe
    return mock


@pytest.fixture
def mock_core():
    """Mock PersistentStoreCore; upsert echoes the item back by default."""
    core = MagicMock(spec=PersistentStoreCore)
    core.get.return_value = None
    core.get_all.return_value = {}
    core.initialized.return_value = False
    core.upsert.side_effect = lambda kind, item: item
    return core


class FakeClock:
    """Manually advanced monotonic clock."""
    
    def __init__(self, start: float = 1000.0):
        self.now = start
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
