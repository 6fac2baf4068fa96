# supplyhub/services/cart_storage.py
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict

import redis

from supplyhub.utils.retry import redis_retry
from supplyhub.utils.settings import CART_STORAGE_BACKEND, CART_STORAGE_PATH, REDIS_URL
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)


class CartStorage(ABC):
    """Durable string slots addressed by key, like a browser's localStorage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...


class MemoryCartStorage(CartStorage):
    def __init__(self, initial: Dict[str, str] | None = None):
        self.slots: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        self.slots[key] = value

    def delete(self, key: str) -> None:
        self.slots.pop(key, None)


class FileCartStorage(CartStorage):
    """All slots of one profile kept in a single JSON file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or CART_STORAGE_PATH)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Profile file {self.path} unreadable, starting fresh: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Profile file {self.path} has unexpected layout, starting fresh")
            return {}
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data), encoding="utf-8")
        tmp.replace(self.path)

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


class RedisCartStorage(CartStorage):
    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def get(self, key: str) -> str | None:
        return self.redis.get(key)

    @redis_retry()
    def set(self, key: str, value: str) -> None:
        self.redis.set(key, value)

    @redis_retry()
    def delete(self, key: str) -> None:
        self.redis.delete(key)


def build_cart_storage(backend: str | None = None) -> CartStorage:
    backend = (backend or CART_STORAGE_BACKEND).lower()
    logger.info(f"Cart storage backend: {backend}")

    if backend == "redis":
        return RedisCartStorage()
    if backend == "file":
        return FileCartStorage()
    if backend == "memory":
        return MemoryCartStorage()
    raise ValueError(f"Unknown cart storage backend: {backend}")
