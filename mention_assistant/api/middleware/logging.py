"""
API Request Logging Middleware.

Logs incoming requests and responses and tags them with a request id.

Sandi Metz Principles:
- Single Responsibility: Request/response logging
- Non-intrusive: Doesn't modify request/response bodies
- Configurable: Excluded paths and slow threshold
"""

import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from mention_assistant.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    enabled: bool = True
    excluded_paths: List[str] = field(
        default_factory=lambda: ["/health", "/live", "/ready"]
    )
    slow_request_threshold_ms: float = 5000.0


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware for request/response logging.

    The request id is bound to structlog context vars for the duration of
    the request and returned in the X-Request-ID header.
    """

    def __init__(self, app, config: Optional[LoggingConfig] = None):
        """
        Initialize middleware.

        Args:
            app: FastAPI application
            config: Logging configuration
        """
        super().__init__(app)
        self._config = config or LoggingConfig()

    def _generate_request_id(self) -> str:
        """Generate unique request ID."""
        return str(uuid.uuid4())[:8]

    def _should_log(self, path: str) -> bool:
        """Check if path should be logged."""
        if not self._config.enabled:
            return False
        return path not in self._config.excluded_paths

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request with logging.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response
        """
        request_id = self._generate_request_id()

        if not self._should_log(request.url.path):
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response

        structlog.contextvars.bind_contextvars(request_id=request_id)
        start_time = time.time()

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            client=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                "Request failed", duration_ms=round(duration_ms, 2), error=str(e)
            )
            raise
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        duration_ms = (time.time() - start_time) * 1000
        response_log = {
            "request_id": request_id,
            "status": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }

        if duration_ms > self._config.slow_request_threshold_ms:
            logger.warning("Slow request detected", **response_log)
        else:
            logger.info("Request completed", **response_log)

        response.headers["X-Request-ID"] = request_id
        return response


# Default configuration
default_logging_config = LoggingConfig()
