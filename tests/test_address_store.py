"""
Tests for the in-memory address store.
"""
import threading

import pytest

from shorturl_app.store.factory import StoreFactory, StoreBackend
from shorturl_app.store.strategies import InMemoryAddressStore


class TestInMemoryAddressStore:

    def test_put_then_get(self, store):
        store.put("abc123", "https://example.com")

        assert store.get("abc123") == "https://example.com"
        assert "abc123" in store
        assert len(store) == 1

    def test_missing_token(self, store):
        assert store.get("nothere") is None
        assert "nothere" not in store

    def test_put_overwrites(self, store):
        """A colliding token replaces the older mapping"""
        store.put("abc123", "https://first.example")
        store.put("abc123", "https://second.example")

        assert store.get("abc123") == "https://second.example"
        assert len(store) == 1

    def test_concurrent_puts(self, store):
        """Writes from many threads all land in the store"""
        def writer(worker_id):
            for i in range(200):
                store.put(f"w{worker_id}-{i}", f"https://example.com/{worker_id}/{i}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == 8 * 200
        assert store.get("w3-150") == "https://example.com/3/150"


class TestStoreFactory:

    def test_creates_memory_store(self):
        store = StoreFactory.create(StoreBackend.MEMORY)
        assert isinstance(store, InMemoryAddressStore)
        assert len(store) == 0

    def test_creates_fresh_instances(self):
        assert StoreFactory.create(StoreBackend.MEMORY) is not StoreFactory.create(StoreBackend.MEMORY)

    def test_backend_names(self):
        assert StoreBackend("memory") is StoreBackend.MEMORY
        with pytest.raises(ValueError):
            StoreBackend("redis")
