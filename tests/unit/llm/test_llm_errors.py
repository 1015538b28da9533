"""Test completion error mapping."""

import httpx
import pytest
from openai import (
    APIConnectionError,
    APITimeoutError,
    BadRequestError,
    InternalServerError,
    NotFoundError,
    RateLimitError,
)

from mention_assistant.exceptions import ModelError
from mention_assistant.llm.errors import infer_kind, kind_of, to_model_error
from mention_assistant.models.error import ModelErrorKind

REQUEST = httpx.Request("POST", "https://api.example.com/v1/chat/completions")


def status_error(error_class, status_code, message="error", body=None):
    """Build an OpenAI status error."""
    response = httpx.Response(status_code, request=REQUEST)
    return error_class(message, response=response, body=body)


class TestKindOf:
    """Test tagging OpenAI client errors."""

    def test_should_tag_rate_limit(self):
        """Test 429 errors."""
        error = status_error(RateLimitError, 429, "Rate limit reached")

        assert kind_of(error) == ModelErrorKind.RATE_LIMITED

    def test_should_tag_not_found_as_unavailable(self):
        """Test 404 errors."""
        error = status_error(NotFoundError, 404, "The model does not exist")

        assert kind_of(error) == ModelErrorKind.MODEL_UNAVAILABLE

    def test_should_tag_decommissioned_code(self):
        """Test structured error codes."""
        error = status_error(
            BadRequestError,
            400,
            "bad request",
            body={"code": "model_decommissioned", "message": "gone"},
        )

        assert kind_of(error) == ModelErrorKind.MODEL_UNAVAILABLE

    def test_should_tag_connection_errors(self):
        """Test transport failures."""
        assert kind_of(APIConnectionError(request=REQUEST)) == ModelErrorKind.TRANSPORT
        assert kind_of(APITimeoutError(request=REQUEST)) == ModelErrorKind.TRANSPORT

    def test_should_fall_back_to_text_for_other_status(self):
        """Test untagged status errors use their text."""
        error = status_error(InternalServerError, 500, "upstream exploded")

        assert kind_of(error) == ModelErrorKind.OTHER


class TestInferKind:
    """Test text matching for untagged errors."""

    @pytest.mark.parametrize(
        "message, kind",
        [
            ("model_not_found: llama-9", ModelErrorKind.MODEL_UNAVAILABLE),
            ("The model has been decommissioned", ModelErrorKind.MODEL_UNAVAILABLE),
            ("Rate limit exceeded", ModelErrorKind.RATE_LIMITED),
            ("HTTP 429", ModelErrorKind.RATE_LIMITED),
            ("Request timed out", ModelErrorKind.TRANSPORT),
            ("something else", ModelErrorKind.OTHER),
        ],
    )
    def test_should_infer_kind(self, message, kind):
        """Test marker precedence."""
        assert infer_kind(message) == kind

    def test_unavailable_should_win_over_rate_limit(self):
        """Test precedence when both markers appear."""
        message = "model_not_found after 429 retries"

        assert infer_kind(message) == ModelErrorKind.MODEL_UNAVAILABLE


class TestToModelError:
    """Test wrapping arbitrary failures."""

    def test_should_keep_model_errors(self):
        """Test model errors pass through untouched."""
        error = ModelError(ModelErrorKind.EMPTY_RESPONSE)

        assert to_model_error(error, "ctx") is error

    def test_should_wrap_unexpected_errors(self):
        """Test plain exceptions become OTHER."""
        wrapped = to_model_error(RuntimeError("boom"), "groq API call failed")

        assert wrapped.kind == ModelErrorKind.OTHER
        assert "RuntimeError - boom" in str(wrapped)
