from concurrent.futures import ThreadPoolExecutor
import pytest

from tokencat.fetcher.caches import PersistentCache


def test_persistent_cache_read_write(persistent_cache: PersistentCache):
    assert persistent_cache.get("a") is None
    persistent_cache.put("a", b"1")
    assert persistent_cache.get("a") == b"1"
    persistent_cache.put("a", b"2")
    assert persistent_cache.get("a") == b"2"


def test_persistent_cache_survives_reopen(cache_path: str):
    cache = PersistentCache(cache_path, size=1)
    cache.put("a", b"1")
    cache.put("b", b"2")
    # "a" is evicted from memory but is still on disk
    assert cache.get("a") == b"1"
    cache.close()

    reopened = PersistentCache(cache_path)
    try:
        assert reopened.get("a") == b"1"
        assert reopened.get("b") == b"2"
        assert reopened.get("c") is None
    finally:
        reopened.close()


def test_persistent_cache_binary_values(persistent_cache: PersistentCache):
    value = bytes(range(256))
    persistent_cache.put("blob", value)
    assert persistent_cache.get("blob") == value


def test_persistent_cache_concurrent_writes(persistent_cache: PersistentCache):
    keys = [f"key{i}" for i in range(32)]
    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(lambda k: persistent_cache.put(k, k.encode()), keys))
    assert all(persistent_cache.get(k) == k.encode() for k in keys)


def test_persistent_cache_requires_path():
    with pytest.raises(ValueError):
        PersistentCache()
