from concurrent.futures import ThreadPoolExecutor
import pytest

from tokencat.fetcher.caches import MemoryCache


def test_memory_cache_read_write(memory_cache: MemoryCache):
    assert memory_cache.get("a") is None
    memory_cache.put("a", b"1")
    assert memory_cache.get("a") == b"1"
    memory_cache.put("a", b"2")
    assert memory_cache.get("a") == b"2"
    assert len(memory_cache) == 1


def test_memory_cache_evicts_least_recently_used():
    cache = MemoryCache(size=2)
    cache.put("a", b"1")
    cache.put("b", b"2")
    assert cache.get("a") == b"1"
    cache.put("c", b"3")
    assert cache.get("b") is None
    assert cache.get("a") == b"1"
    assert cache.get("c") == b"3"
    assert len(cache) == 2


def test_memory_cache_size():
    assert MemoryCache().size == 2048
    assert MemoryCache(size=10).size == 10
    with pytest.raises(ValueError):
        MemoryCache(size=0)


def test_memory_cache_concurrent_writes(memory_cache: MemoryCache):
    keys = [f"key{i}" for i in range(16)]
    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(lambda k: memory_cache.put(k, k.encode()), keys))
    assert all(memory_cache.get(k) == k.encode() for k in keys)
