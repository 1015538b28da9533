"""Unit tests for Request Logging Middleware."""

from unittest.mock import MagicMock

import pytest

from mention_assistant.api.middleware.logging import (
    LoggingConfig,
    RequestLoggingMiddleware,
)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_values(self):
        """Test default configuration values."""
        config = LoggingConfig()

        assert config.enabled is True
        assert config.slow_request_threshold_ms == 5000.0
        assert "/health" in config.excluded_paths


class TestRequestLoggingMiddleware:
    """Tests for RequestLoggingMiddleware."""

    def _create_mock_request(self, path="/api/v1/assistant/mention"):
        """Create a mock request."""
        request = MagicMock()
        request.method = "POST"
        request.url.path = path
        request.client.host = "127.0.0.1"
        return request

    async def _call_next(self, request):
        """Mock call_next function."""
        response = MagicMock()
        response.status_code = 200
        response.headers = {}
        return response

    @pytest.fixture
    def middleware(self):
        return RequestLoggingMiddleware(MagicMock(), config=LoggingConfig())

    @pytest.mark.asyncio
    async def test_adds_request_id_header(self, middleware):
        """Test middleware adds X-Request-ID header."""
        response = await middleware.dispatch(
            self._create_mock_request(), self._call_next
        )

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_excluded_path_still_tagged(self, middleware):
        """Test excluded paths skip logging but keep the header."""
        response = await middleware.dispatch(
            self._create_mock_request("/health"), self._call_next
        )

        assert "X-Request-ID" in response.headers

    @pytest.mark.asyncio
    async def test_reraises_handler_errors(self, middleware):
        """Test exceptions propagate after logging."""

        async def failing_call_next(request):
            raise RuntimeError("handler failed")

        with pytest.raises(RuntimeError):
            await middleware.dispatch(self._create_mock_request(), failing_call_next)

    def test_should_log_respects_config(self):
        """Test disabled middleware logs nothing."""
        middleware = RequestLoggingMiddleware(
            MagicMock(), config=LoggingConfig(enabled=False)
        )

        assert middleware._should_log("/api/v1/assistant/mention") is False
