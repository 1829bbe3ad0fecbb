# 📄 File: my_garden/shared/infrastructure/storage/redis_storage.py
#
# 🧭 Purpose (Layman Explanation):
# Keeps the garden's storage slots in Redis so the data can live outside the app process.
#
# 🧪 Purpose (Technical Summary):
# KeyValueStorage backed by redis.asyncio with a lazily created connection pool.
# Responses are kept as raw bytes (decode_responses=False) because slots hold
# opaque encoded blobs, not text.
#
# 🔗 Dependencies:
# - redis Python package (redis.asyncio)
#
# 🔄 Connected Modules / Calls From:
# - Storage factory (STORAGE_BACKEND=redis)
# - Application shutdown (close)

from typing import Any, Dict, Optional

import redis.asyncio as redis
from redis.asyncio import ConnectionPool, Redis

from my_garden.shared.core.exceptions import StorageError
from my_garden.shared.utils.logging import get_logger

from .base import KeyValueStorage

logger = get_logger(__name__)


class RedisStorage(KeyValueStorage):
    """Redis storage with connection management."""

    backend_name = "redis"

    def __init__(
        self,
        redis_url: str,
        max_connections: int = 10,
        key_prefix: str = "my_garden:",
        client: Optional[Redis] = None,
    ):
        self.redis_url = redis_url
        self.max_connections = max_connections
        self.key_prefix = key_prefix
        self._connection_pool: Optional[ConnectionPool] = None
        self._redis_client: Optional[Redis] = client

    @property
    def pool_kwargs(self) -> Dict[str, Any]:
        return {
            "max_connections": self.max_connections,
            "decode_responses": False,
            "retry_on_timeout": True,
            "health_check_interval": 30,
        }

    def _client(self) -> Redis:
        if self._redis_client is None:
            self._connection_pool = ConnectionPool.from_url(self.redis_url, **self.pool_kwargs)
            self._redis_client = Redis(connection_pool=self._connection_pool)
        return self._redis_client

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def get(self, key: str) -> Optional[bytes]:
        try:
            return await self._client().get(self._key(key))
        except redis.RedisError as e:
            logger.error(f"Redis GET failed for {key}: {e}")
            raise StorageError(
                f"Failed to read slot {key}", backend=self.backend_name, key=key, operation="get"
            ) from e

    async def set(self, key: str, value: bytes) -> None:
        try:
            await self._client().set(self._key(key), value)
        except redis.RedisError as e:
            logger.error(f"Redis SET failed for {key}: {e}")
            raise StorageError(
                f"Failed to write slot {key}", backend=self.backend_name, key=key, operation="set"
            ) from e

    async def delete(self, key: str) -> bool:
        try:
            return bool(await self._client().delete(self._key(key)))
        except redis.RedisError as e:
            raise StorageError(
                f"Failed to delete slot {key}", backend=self.backend_name, key=key, operation="delete"
            ) from e

    async def health_check(self) -> bool:
        try:
            return bool(await self._client().ping())
        except redis.RedisError as e:
            logger.warning(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connections and cleanup."""
        if self._redis_client:
            await self._redis_client.aclose()
            self._redis_client = None

        if self._connection_pool:
            await self._connection_pool.disconnect()
            self._connection_pool = None
