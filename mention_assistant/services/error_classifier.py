"""
Error classifier.

Turns completion failures into branded, user-facing messages.

Sandi Metz Principles:
- Single Responsibility: Failure-to-text mapping
- Small methods: One message per failure kind
- Pure functions: No side effects
"""

from typing import Optional

from mention_assistant.exceptions import ModelError
from mention_assistant.llm.errors import infer_kind
from mention_assistant.models.error import ModelErrorKind
from mention_assistant.models.request import AssistantRequest

CLOSING = "Keep learning! 📚✨"

MODEL_UNAVAILABLE_BODY = (
    "The AI model I rely on is temporarily unavailable. "
    "Please try again shortly."
)

RATE_LIMITED_BODY = (
    "I'm receiving too many requests right now. "
    "Please wait a moment and try again."
)

GENERIC_BODY = (
    "I encountered an error while processing your request. Please try again, "
    "and if the issue persists, contact the administrators."
)

CONFIGURATION_MISSING_BODY = (
    "I'd love to help with this, but I need an API key to be configured. "
    "Please contact the administrators to enable full AI features."
)

EMPTY_MESSAGE_BODY = (
    "I didn't catch a question there. Ask me anything about your "
    "assignments, homework or study topics."
)

DIAGNOSTIC_LENGTH = 120
ECHO_LENGTH = 100


def excerpt(text: Optional[str], limit: int) -> str:
    """
    Shorten text for display.

    Args:
        text: Text to shorten
        limit: Maximum characters kept

    Returns:
        Text prefix with "..." when truncated
    """
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class ErrorClassifier:
    """
    Maps failures to degraded messages.

    Every message has the same shape: preamble, body, closing.
    """

    def __init__(self, assistant_name: str = "EduHive Assistant"):
        """
        Initialize classifier.

        Args:
            assistant_name: Name used in the preamble
        """
        self._assistant_name = assistant_name

    @property
    def preamble(self) -> str:
        """Fixed opening line of every degraded message."""
        return f"🤖 Hi! I'm {self._assistant_name}."

    def kind_of(self, error: Exception) -> ModelErrorKind:
        """
        Get the failure kind of an error.

        Args:
            error: Failure raised by the invoker

        Returns:
            Tag from ModelError, or inferred from untagged error text
        """
        if isinstance(error, ModelError):
            return error.kind
        return infer_kind(str(error))

    def classify(self, error: Exception) -> str:
        """
        Build the user-facing message for a failure.

        Args:
            error: Failure raised by the invoker

        Returns:
            Degraded message text
        """
        kind = self.kind_of(error)

        if kind == ModelErrorKind.MODEL_UNAVAILABLE:
            return self._compose(MODEL_UNAVAILABLE_BODY)

        if kind == ModelErrorKind.RATE_LIMITED:
            return self._compose(RATE_LIMITED_BODY)

        diagnostic = excerpt(str(error), DIAGNOSTIC_LENGTH) or type(error).__name__
        return self._compose(f"{GENERIC_BODY}\n\nDiagnostic ({kind.value}): {diagnostic}")

    def configuration_missing(self, request: Optional[AssistantRequest] = None) -> str:
        """
        Build the message shown when no API key is configured.

        Args:
            request: Request that could not be served

        Returns:
            Degraded message echoing what was asked
        """
        topic = "your request"
        if request is not None and request.primary_content.strip():
            topic = excerpt(request.primary_content, ECHO_LENGTH)

        return self._compose(
            f"{CONFIGURATION_MISSING_BODY}\n\n"
            f'In the meantime, I can see you\'re asking about: "{topic}"'
        )

    def empty_message(self) -> str:
        """Build the reply to a blank chat message."""
        return self._compose(EMPTY_MESSAGE_BODY)

    def _compose(self, body: str) -> str:
        return f"{self.preamble}\n\n{body}\n\n{CLOSING}"
