import json
from typing import Any, Optional

import redis.asyncio as aioredis
from loguru import logger
from redis.asyncio import ConnectionPool

from .interface import ICache
from .type import RedisConfig


class RedisCache(ICache):
    """Async Redis cache with JSON values and a key prefix.

    Example:
        >>> cache = RedisCache(RedisConfig(host="localhost"))
        >>> await cache.set("insights", [{"id": "x"}], ttl=600)
        >>> await cache.get_json("insights")
        [{'id': 'x'}]
    """

    def __init__(self, config: RedisConfig):
        self.config = config
        self.client = None
        self.pool = None
        self._initialize_client()

    def _initialize_client(self) -> None:
        try:
            pool_kwargs = {
                "host": self.config.host,
                "port": self.config.port,
                "db": self.config.db,
                "password": self.config.password,
                "username": self.config.username,
                "encoding": self.config.encoding,
                "decode_responses": self.config.decode_responses,
                "max_connections": self.config.max_connections,
                "socket_timeout": self.config.socket_timeout,
                "socket_connect_timeout": self.config.socket_connect_timeout,
            }
            if self.config.ssl:
                pool_kwargs["connection_class"] = aioredis.SSLConnection

            self.pool = ConnectionPool(**pool_kwargs)
            self.client = aioredis.Redis(connection_pool=self.pool)
            logger.info("Redis client initialized")
        except Exception as e:
            logger.error(f"Failed to initialize Redis client: {e}")
            raise

    def _key(self, key: str) -> str:
        if not self.config.key_prefix:
            return key
        return f"{self.config.key_prefix}:{key}"

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.client.get(self._key(key))
        except Exception as e:
            logger.error(f"Redis GET error for key '{key}': {e}")
            return None

    async def get_json(self, key: str) -> Optional[Any]:
        """Get and JSON-decode a value. Undecodable values count as a miss."""
        value = await self.get(key)
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            logger.error(f"JSON decode error for key '{key}': {e}")
            return None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Store ``value``; non-string values are JSON-encoded.

        Args:
            key: Cache key (prefix is added)
            value: str or any JSON-serializable object
            ttl: Expiry in seconds, None for no expiry
        """
        try:
            if not isinstance(value, str):
                value = json.dumps(value, default=str)
            if ttl:
                return bool(await self.client.setex(self._key(key), ttl, value))
            return bool(await self.client.set(self._key(key), value))
        except Exception as e:
            logger.error(f"Redis SET error for key '{key}': {e}")
            return False

    async def delete(self, key: str) -> bool:
        try:
            return await self.client.delete(self._key(key)) > 0
        except Exception as e:
            logger.error(f"Redis DELETE error for key '{key}': {e}")
            return False

    async def ttl(self, key: str) -> int:
        """Remaining TTL in seconds; -1 no expiry, -2 missing key or error."""
        try:
            return await self.client.ttl(self._key(key))
        except Exception as e:
            logger.error(f"Redis TTL error for key '{key}': {e}")
            return -2

    async def health_check(self) -> bool:
        try:
            return bool(await self.client.ping())
        except Exception as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        if self.client:
            await self.client.aclose()
        if self.pool:
            await self.pool.disconnect()
        logger.info("Redis connection closed")


__all__ = ["RedisCache"]
