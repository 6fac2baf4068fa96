import json

import pytest
import redis

from supplyhub.services.cart_storage import (
    CartStorage,
    FileCartStorage,
    MemoryCartStorage,
    RedisCartStorage,
    build_cart_storage,
)


def test_file_storage_round_trip(tmp_path):
    storage = FileCartStorage(tmp_path / "profile" / "slots.json")

    assert storage.get("supplyhub_cart") is None
    storage.set("supplyhub_cart", "[]")
    storage.set("other", "x")

    reopened = FileCartStorage(tmp_path / "profile" / "slots.json")
    assert reopened.get("supplyhub_cart") == "[]"

    reopened.delete("supplyhub_cart")
    assert reopened.get("supplyhub_cart") is None
    assert reopened.get("other") == "x"


def test_file_storage_tolerates_broken_profile(tmp_path):
    path = tmp_path / "slots.json"
    path.write_text("{{{", encoding="utf-8")

    storage = FileCartStorage(path)

    assert storage.get("supplyhub_cart") is None
    storage.set("supplyhub_cart", "[]")
    assert json.loads(path.read_text(encoding="utf-8")) == {"supplyhub_cart": "[]"}


def test_memory_storage_delete_missing_key():
    storage = MemoryCartStorage()
    storage.delete("nothing")
    assert storage.get("nothing") is None


class FlakyRedis:
    def __init__(self, failures: int, error=redis.ConnectionError):
        self.failures = failures
        self.error = error
        self.calls = 0
        self.data = {}

    def get(self, key):
        self.calls += 1
        if self.failures:
            self.failures -= 1
            raise self.error("connection reset")
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def delete(self, key):
        self.data.pop(key, None)


def test_redis_storage_retries_transient_errors(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda _: None)
    client = FlakyRedis(failures=2)
    storage = RedisCartStorage(client=client)

    storage.set("supplyhub_cart", "[]")

    assert storage.get("supplyhub_cart") == "[]"
    assert client.failures == 0


def test_redis_storage_gives_up_after_three_attempts(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda _: None)
    storage = RedisCartStorage(client=FlakyRedis(failures=5))

    with pytest.raises(redis.ConnectionError):
        storage.get("supplyhub_cart")


def test_build_cart_storage():
    assert isinstance(build_cart_storage("memory"), MemoryCartStorage)
    assert isinstance(build_cart_storage("FILE"), FileCartStorage)
    with pytest.raises(ValueError):
        build_cart_storage("floppy")


def test_redis_storage_retries_timeouts(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda _: None)
    client = FlakyRedis(failures=1, error=redis.TimeoutError)

    assert RedisCartStorage(client=client).get("supplyhub_cart") is None
    assert client.calls == 2


def test_redis_storage_does_not_retry_rejected_commands(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda _: None)
    client = FlakyRedis(failures=1, error=redis.ResponseError)

    with pytest.raises(redis.ResponseError):
        RedisCartStorage(client=client).get("supplyhub_cart")
    assert client.calls == 1


def test_storage_backend_must_implement_every_slot_operation():
    class ReadOnlyStorage(CartStorage):
        def get(self, key):
            return None

    with pytest.raises(TypeError):
        ReadOnlyStorage()
