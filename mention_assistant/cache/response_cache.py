"""
Response cache.

Sandi Metz Principles:
- Single Responsibility: Store successful answers for a TTL window
- Dependency Injection: TTL and clock injected
- Small methods: Each operation < 10 lines
"""

import time
from typing import Callable, Dict, Optional, Protocol

from mention_assistant.models.cache_entry import CacheEntry
from mention_assistant.utils.logger import get_logger

logger = get_logger(__name__)

Clock = Callable[[], float]


class ResponseCache(Protocol):
    """
    Key-agnostic answer cache.

    Keys are derived by the caller.
    """

    async def get(self, key: str) -> Optional[str]:
        """Return the cached value, or None if absent or expired."""
        ...

    async def put(self, key: str, value: str) -> None:
        """Store value, replacing any entry for key."""
        ...


class InMemoryResponseCache:
    """
    Process-local response cache.

    Expired entries are dropped lazily when read. When a put would exceed
    max_size, expired entries are swept first and then the oldest entries
    are evicted. Concurrent identical requests may both miss; the last put
    wins.
    """

    def __init__(
        self, ttl_seconds: float = 3600, clock: Clock = time.time, max_size: int = 1000
    ):
        """
        Initialize cache.

        Args:
            ttl_seconds: Entry lifetime in seconds
            clock: Time source returning epoch seconds
            max_size: Maximum number of stored entries
        """
        if ttl_seconds < 0:
            raise ValueError("TTL cannot be negative")
        if max_size < 1:
            raise ValueError("Max size must be at least 1")
        self._ttl = ttl_seconds
        self._clock = clock
        self._max_size = max_size
        self._entries: Dict[str, CacheEntry] = {}

    @property
    def ttl_seconds(self) -> float:
        """Entry lifetime in seconds."""
        return self._ttl

    @property
    def max_size(self) -> int:
        """Maximum number of stored entries."""
        return self._max_size

    async def get(self, key: str) -> Optional[str]:
        """
        Get cached value for key.

        Args:
            key: Cache key

        Returns:
            Cached value if present and fresh, None otherwise
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.is_expired(self._clock(), self._ttl):
            del self._entries[key]
            logger.debug("Cache entry expired", key=key)
            return None

        return entry.value

    async def put(self, key: str, value: str) -> None:
        """
        Store value with a fresh timestamp.

        Args:
            key: Cache key
            value: Answer text
        """
        now = self._clock()
        # Re-insert so the dict stays ordered oldest first
        self._entries.pop(key, None)

        if len(self._entries) >= self._max_size:
            self._evict(now)

        self._entries[key] = CacheEntry(key=key, value=value, created_at=now)
        logger.debug("Cache stored", key=key, size=len(self._entries))

    def _evict(self, now: float) -> None:
        """Sweep expired entries, then drop the oldest until there is room."""
        expired = [
            key
            for key, entry in self._entries.items()
            if entry.is_expired(now, self._ttl)
        ]
        for key in expired:
            del self._entries[key]

        while len(self._entries) >= self._max_size:
            oldest = next(iter(self._entries))
            del self._entries[oldest]

        logger.debug("Cache evicted", expired=len(expired), size=len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
