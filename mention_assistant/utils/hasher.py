"""
Cache key generation utilities.

Sandi Metz Principles:
- Single Responsibility: Hash generation
- Small functions: Each does one thing
- Pure functions: No side effects
"""

import hashlib
from typing import Optional

from mention_assistant.models.request import AssistantRequest


def truncate(text: Optional[str], limit: int) -> str:
    """
    Take the first characters of text.

    Args:
        text: Text to truncate (None is treated as empty)
        limit: Maximum number of characters

    Returns:
        Prefix of text
    """
    return (text or "")[:limit]


def generate_cache_key(
    request: AssistantRequest, content_prefix: int = 200, context_prefix: int = 100
) -> str:
    """
    Generate cache key for an assistant request.

    Long inputs that share a prefix map to the same key.

    Args:
        request: Assistant request
        content_prefix: Characters of primary content to hash
        context_prefix: Characters of auxiliary context to hash

    Returns:
        Cache key (assistant:<intent>:sha256hash)
    """
    signature = "|".join(
        [
            request.intent.value,
            truncate(request.primary_content, content_prefix),
            truncate(request.auxiliary_context, context_prefix),
        ]
    )
    hash_value = hashlib.sha256(signature.encode()).hexdigest()
    return f"assistant:{request.intent.value}:{hash_value}"
