# hamshark/services/cart_store.py
"""
Durable client-side storage for the cart.

A tiny key -> JSON-text store in the shape of browser localStorage. Writers
overwrite the whole value (last write wins); there is no coordination
between two processes sharing the same store.
"""
import os
import tempfile
from pathlib import Path
from typing import Dict, Protocol

import redis

from hamshark.utils.logging import get_logger
from hamshark.utils.retry import redis_retry
from hamshark.utils.settings import CART_STORE, CART_STORE_DIR, REDIS_URL

logger = get_logger(__name__)


class CartStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemoryCartStore:
    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileCartStore:
    """One <key>.json file per key inside a directory."""

    def __init__(self, directory: str | Path | None = None):
        self.directory = Path(directory or CART_STORE_DIR)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        # write to a temp file and swap it in so a reader never sees half a cart
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp, self._path(key))
        except OSError:
            Path(tmp).unlink(missing_ok=True)
            raise

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class RedisCartStore:
    """Cart keys live under "storefront:<session>:<key>"."""

    def __init__(self, session_id: str = "default", url: str | None = None, client: redis.Redis | None = None):
        self.session_id = session_id
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    def _key(self, key: str) -> str:
        return f"storefront:{self.session_id}:{key}"

    @redis_retry()
    def get(self, key: str) -> str | None:
        return self.redis.get(self._key(key))

    @redis_retry()
    def set(self, key: str, value: str) -> None:
        logger.debug(f"SET {self._key(key)} ({len(value)} bytes)")
        self.redis.set(self._key(key), value)

    @redis_retry()
    def remove(self, key: str) -> None:
        self.redis.delete(self._key(key))


def create_cart_store(kind: str | None = None, **kwargs) -> CartStore:
    kind = (kind or CART_STORE).lower()
    if kind == "redis":
        return RedisCartStore(**kwargs)
    if kind == "memory":
        return InMemoryCartStore()
    if kind == "file":
        return JsonFileCartStore(**kwargs)
    raise ValueError(f"Unknown cart store: {kind}")

