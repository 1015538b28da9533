"""
Two-step fallback strategy.

Sandi Metz Principles:
- Single Responsibility: Compose a primary attempt with one fallback
- Small methods: Each method < 10 lines
- Clear naming: Self-documenting code
"""

from typing import Awaitable, Callable, TypeVar

from mention_assistant.exceptions import ModelError
from mention_assistant.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Attempt = Callable[[], Awaitable[T]]


class FallbackStrategy:
    """
    Runs a primary attempt and, if it fails, exactly one fallback attempt.

    Only ModelError triggers the fallback. Anything else propagates.
    """

    async def execute(
        self,
        primary: Attempt[T],
        fallback: Attempt[T],
        primary_name: str = "primary",
        fallback_name: str = "fallback",
    ) -> T:
        """
        Execute primary, falling back once on failure.

        Args:
            primary: First attempt
            fallback: Attempt to run if primary fails
            primary_name: Label for logs
            fallback_name: Label for logs

        Returns:
            Result of the first successful attempt

        Raises:
            ModelError: The fallback's error if both attempts fail
        """
        try:
            logger.info("Trying primary attempt", attempt=primary_name)
            return await primary()
        except ModelError as e:
            logger.warning(
                "Primary attempt failed, using fallback",
                primary=primary_name,
                fallback=fallback_name,
                kind=e.kind.value,
                error=str(e),
            )

        try:
            return await fallback()
        except ModelError as fallback_error:
            logger.error(
                "Both attempts failed",
                primary=primary_name,
                fallback=fallback_name,
                kind=fallback_error.kind.value,
            )
            raise
