"""
Completion error mapping.

Converts third-party client errors into tagged model errors at the call
boundary. Text matching is only used for errors that carry no status or code.

Sandi Metz Principles:
- Single Responsibility: Error tagging
- Small functions: One check per cause
"""

from openai import (
    APIConnectionError,
    APIError,
    NotFoundError,
    OpenAIError,
    RateLimitError,
)

from mention_assistant.exceptions import ModelError
from mention_assistant.models.error import ModelErrorKind

MODEL_UNAVAILABLE_CODES = {"model_not_found", "model_decommissioned"}

MODEL_UNAVAILABLE_MARKERS = (
    "model_not_found",
    "model_decommissioned",
    "decommissioned",
    "does not exist",
    "unknown model",
    "model not found",
)

RATE_LIMIT_MARKERS = ("rate limit", "rate_limit", "429", "too many requests")

TRANSPORT_MARKERS = ("timed out", "timeout", "connection", "network")


def infer_kind(message: str) -> ModelErrorKind:
    """
    Infer the failure kind from an error message.

    Args:
        message: Error text

    Returns:
        Best matching kind (OTHER when nothing matches)
    """
    text = message.lower()

    if any(marker in text for marker in MODEL_UNAVAILABLE_MARKERS):
        return ModelErrorKind.MODEL_UNAVAILABLE

    if any(marker in text for marker in RATE_LIMIT_MARKERS):
        return ModelErrorKind.RATE_LIMITED

    if any(marker in text for marker in TRANSPORT_MARKERS):
        return ModelErrorKind.TRANSPORT

    return ModelErrorKind.OTHER


def kind_of(error: OpenAIError) -> ModelErrorKind:
    """
    Tag an OpenAI client error.

    Args:
        error: Error raised by the OpenAI client

    Returns:
        Model error kind
    """
    if isinstance(error, RateLimitError):
        return ModelErrorKind.RATE_LIMITED

    if isinstance(error, NotFoundError):
        return ModelErrorKind.MODEL_UNAVAILABLE

    if isinstance(error, APIError) and error.code in MODEL_UNAVAILABLE_CODES:
        return ModelErrorKind.MODEL_UNAVAILABLE

    if isinstance(error, APIConnectionError):
        return ModelErrorKind.TRANSPORT

    return infer_kind(str(error))


def to_model_error(error: Exception, context: str) -> ModelError:
    """
    Wrap any completion failure in a tagged model error.

    Args:
        error: Original exception
        context: Context description

    Returns:
        Model error carrying the original message
    """
    if isinstance(error, ModelError):
        return error

    if isinstance(error, OpenAIError):
        kind = kind_of(error)
    else:
        kind = infer_kind(str(error))

    return ModelError(kind, f"{context}: {type(error).__name__} - {error}")
