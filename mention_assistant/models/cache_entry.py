"""
Cache entry models.

Sandi Metz Principles:
- Single Responsibility: Cache data structure
- Clear naming: Descriptive fields
- Immutable data: All fields are read-only after creation
"""

from pydantic import BaseModel, ConfigDict, Field


class CacheEntry(BaseModel):
    """Cached assistant answer with its creation time."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Request digest")
    value: str = Field(..., description="Cached assistant answer")
    created_at: float = Field(..., ge=0, description="Creation time (epoch seconds)")

    def age_seconds(self, now: float) -> float:
        """Calculate entry age in seconds."""
        return now - self.created_at

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        """Check if entry outlived its TTL."""
        return self.age_seconds(now) > ttl_seconds
