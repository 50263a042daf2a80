"""Key-value store access for scores and card stacks.

Two interchangeable backends expose the same small set of operations:

- ``RedisStore`` wraps a ``redis.Redis`` client (deployments)
- ``MemoryStore`` keeps everything in a process-local dict (tests, local runs)

A missing key is a normal outcome: ``get`` returns ``None``, ``delete``
returns ``False`` and ``lrange`` returns an empty list. Anything else that
goes wrong surfaces as ``StoreError``.
"""

import fnmatch
import threading
from typing import Optional

import redis
from flask import current_app


class StoreError(Exception):
    """Raised when the key-value store cannot complete an operation."""


class RedisStore:
    def __init__(self, client: redis.Redis) -> None:
        self.client = client

    @classmethod
    def from_address(cls, address: str, password: Optional[str] = None, db: int = 0) -> 'RedisStore':
        host, _, port = address.rpartition(':')
        if not host:
            host, port = address, '6379'
        client = redis.Redis(
            host=host,
            port=int(port or 6379),
            password=password,
            db=db,
            decode_responses=True,
        )
        return cls(client)

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(key)
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc

    def set(self, key: str, value) -> None:
        try:
            self.client.set(key, value)
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc

    def incr(self, key: str) -> int:
        try:
            return self.client.incr(key)
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc

    def delete(self, key: str) -> bool:
        try:
            return self.client.delete(key) > 0
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc

    def lpush(self, key: str, value: str) -> int:
        try:
            return self.client.lpush(key, value)
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc

    def lrange(self, key: str, start: int = 0, end: int = -1) -> list[str]:
        try:
            return self.client.lrange(key, start, end)
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc

    def keys(self, pattern: str) -> list[str]:
        # SCAN may yield a key more than once; keep first-seen order
        try:
            return list(dict.fromkeys(self.client.scan_iter(match=pattern)))
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc


class MemoryStore:
    """Dict-backed store with Redis-like semantics for the operations used here.

    Values are either strings or lists of strings. Operating on a key holding
    the wrong kind of value raises ``StoreError``, as Redis does with WRONGTYPE.
    """

    def __init__(self) -> None:
        self._data: dict[str, object] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._data.get(key)
            if isinstance(value, list):
                raise StoreError(f'WRONGTYPE {key} holds a list')
            return value

    def set(self, key: str, value) -> None:
        with self._lock:
            self._data[key] = str(value)

    def incr(self, key: str) -> int:
        with self._lock:
            current = self._data.get(key, '0')
            if isinstance(current, list):
                raise StoreError(f'WRONGTYPE {key} holds a list')
            try:
                number = int(current) + 1
            except ValueError:
                raise StoreError('value is not an integer or out of range')
            self._data[key] = str(number)
            return number

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def lpush(self, key: str, value: str) -> int:
        with self._lock:
            items = self._data.setdefault(key, [])
            if not isinstance(items, list):
                raise StoreError(f'WRONGTYPE {key} holds a string')
            items.insert(0, value)
            return len(items)

    def lrange(self, key: str, start: int = 0, end: int = -1) -> list[str]:
        with self._lock:
            items = self._data.get(key, [])
            if not isinstance(items, list):
                raise StoreError(f'WRONGTYPE {key} holds a string')
            stop = None if end == -1 else end + 1
            return list(items[start:stop])

    def keys(self, pattern: str) -> list[str]:
        with self._lock:
            return [k for k in self._data if fnmatch.fnmatchcase(k, pattern)]

    def ping(self) -> bool:
        return True


def create_store(config):
    """Build the store selected by ``STORE_BACKEND``."""
    backend = config.get('STORE_BACKEND', 'redis')
    if backend == 'memory':
        return MemoryStore()
    if backend == 'redis':
        return RedisStore.from_address(
            config.get('REDIS_ADDRESS', 'localhost:6379'),
            password=config.get('REDIS_PASSWORD'),
            db=int(config.get('REDIS_DB', 0)),
        )
    raise ValueError(f'Unknown STORE_BACKEND: {backend!r}')


def get_store():
    return current_app.extensions['store']
