"""
API Middleware module.

Contains middleware for request logging.
"""

from mention_assistant.api.middleware.logging import (
    LoggingConfig,
    RequestLoggingMiddleware,
    default_logging_config,
)

__all__ = [
    "LoggingConfig",
    "RequestLoggingMiddleware",
    "default_logging_config",
]
