"""
Redis-backed credential store for deployments that share a session between
several client processes. Use when REDIS_URL is set. Implements the same
interface as the in-memory store.
"""

from __future__ import annotations

from typing import Any, Optional

import redis

from .interfaces import CredentialStore


class RedisCredentialStore(CredentialStore):
    """
    Stores each credential under `credential:<key>`.
    """

    def __init__(self, url: Optional[str] = None, ttl: Optional[int] = None, client: Any = None) -> None:
        if client is None and not url:
            raise ValueError("RedisCredentialStore needs a Redis URL or a client")
        self._client = client or redis.from_url(url, decode_responses=True)
        self._ttl = ttl

    @staticmethod
    def _key(key: str) -> str:
        return f"credential:{key}"

    def get(self, key: str) -> Optional[str]:
        raw = self._client.get(self._key(key))
        if raw is None:
            return None
        if isinstance(raw, bytes):
            return raw.decode("utf-8")
        return str(raw)

    def set(self, key: str, value: str) -> None:
        if self._ttl:
            self._client.setex(self._key(key), self._ttl, value)
        else:
            self._client.set(self._key(key), value)

    def delete(self, key: str) -> None:
        # DEL on a missing key returns 0 and does not raise.
        self._client.delete(self._key(key))

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
