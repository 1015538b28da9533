"""
Cache package.

Response caches keyed by request digest.
"""

from mention_assistant.cache.redis_cache import RedisResponseCache, create_redis_pool
from mention_assistant.cache.response_cache import InMemoryResponseCache, ResponseCache

__all__ = [
    "InMemoryResponseCache",
    "RedisResponseCache",
    "ResponseCache",
    "create_redis_pool",
]
