"""
Unit tests for CacheConfig.
"""

import pytest

from redis_feature_store.caching.cache_config import (
    DEFAULT_CACHE_CONFIG,
    CacheConfig,
    CacheMode,
)


@pytest.mark.parametrize(
    "seconds, mode, ttl",
    [
        (0, CacheMode.DISABLED, None),
        (30, CacheMode.TTL, 30),
        (0.5, CacheMode.TTL, 0.5),
        (-1, CacheMode.FOREVER, None),
    ],
)
def test_from_seconds(seconds, mode, ttl):
    config = CacheConfig.from_seconds(seconds)
    
    assert config.mode is mode
    assert config.ttl_seconds == ttl


def test_default_is_fifteen_second_ttl():
    assert DEFAULT_CACHE_CONFIG == CacheConfig.ttl(15.0)
    assert DEFAULT_CACHE_CONFIG.enabled


def test_flags():
    assert not CacheConfig.disabled().enabled
    assert CacheConfig.forever().enabled
    assert CacheConfig.forever().is_forever
    assert not CacheConfig.ttl(5).is_forever


@pytest.mark.parametrize("seconds", [0, -5, None])
def test_ttl_mode_requires_positive_ttl(seconds):
    with pytest.raises(ValueError):
        CacheConfig(mode=CacheMode.TTL, ttl_seconds=seconds)


def test_ttl_rejected_outside_ttl_mode():
    with pytest.raises(ValueError):
        CacheConfig(mode=CacheMode.FOREVER, ttl_seconds=10)
