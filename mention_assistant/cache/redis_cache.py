"""
Redis-backed response cache.

Shares cached answers between worker processes. Redis enforces the TTL.

Sandi Metz Principles:
- Single Responsibility: Redis cache access
- Small methods: Each operation isolated
- Dependency Injection: Redis pool injected
"""

from typing import Optional

from redis.asyncio import ConnectionPool, Redis

from mention_assistant.config import config
from mention_assistant.utils.logger import get_logger

logger = get_logger(__name__)


async def create_redis_pool() -> ConnectionPool:
    """
    Create Redis connection pool.

    Returns:
        Redis connection pool
    """
    return ConnectionPool.from_url(
        config.redis_url,
        max_connections=config.redis_max_connections,
        decode_responses=True,
    )


class RedisResponseCache:
    """
    Response cache stored in Redis.

    Redis failures are logged and behave like a miss or a skipped store.
    """

    def __init__(
        self, pool: ConnectionPool, ttl_seconds: int = 3600, prefix: str = "cache"
    ):
        """
        Initialize cache.

        Args:
            pool: Redis connection pool
            ttl_seconds: Entry lifetime in seconds
            prefix: Namespace prepended to every key
        """
        self._pool = pool
        self._ttl = ttl_seconds
        self._prefix = prefix

    async def get(self, key: str) -> Optional[str]:
        """
        Get cached value for key.

        Args:
            key: Cache key

        Returns:
            Cached value if found, None otherwise
        """
        try:
            async with Redis(connection_pool=self._pool) as client:
                return await client.get(self._namespaced(key))
        except Exception as e:
            logger.error("Redis fetch failed", key=key, error=str(e))
            return None

    async def put(self, key: str, value: str) -> None:
        """
        Store value, replacing any entry and resetting its TTL.

        Args:
            key: Cache key
            value: Answer text
        """
        try:
            async with Redis(connection_pool=self._pool) as client:
                await client.set(self._namespaced(key), value, ex=self._ttl)
        except Exception as e:
            logger.error("Redis store failed", key=key, error=str(e))

    async def ping(self) -> bool:
        """
        Check Redis connectivity.

        Returns:
            True if Redis answered
        """
        try:
            async with Redis(connection_pool=self._pool) as client:
                return bool(await client.ping())
        except Exception as e:
            logger.error("Redis ping failed", error=str(e))
            return False

    def _namespaced(self, key: str) -> str:
        return f"{self._prefix}:{key}"
