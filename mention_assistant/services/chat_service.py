"""
Assistant chat service.

Answers conversational messages from the quick-chat modal and the
dedicated assistant page. Chat answers are not cached.

Sandi Metz Principles:
- Single Responsibility: Chat orchestration
- Dependency Injection: Invoker and helpers injected
"""

from typing import Optional, Sequence

from mention_assistant.config import AppConfig, config
from mention_assistant.exceptions import ConfigurationError, ModelError
from mention_assistant.llm.model_invoker import ModelInvoker
from mention_assistant.llm.prompt_builder import PromptBuilder
from mention_assistant.models.prompt import ChatTurn
from mention_assistant.services.error_classifier import ErrorClassifier
from mention_assistant.utils.logger import get_logger, log_error

logger = get_logger(__name__)


class ChatService:
    """Conversational assistant replies."""

    def __init__(
        self,
        invoker: ModelInvoker,
        settings: Optional[AppConfig] = None,
        builder: Optional[PromptBuilder] = None,
        error_classifier: Optional[ErrorClassifier] = None,
    ):
        self._settings = settings or config
        self._invoker = invoker
        self._builder = builder or PromptBuilder(self._settings)
        self._errors = error_classifier or ErrorClassifier(
            self._settings.assistant_name
        )

    async def reply(
        self, message: str, history: Sequence[ChatTurn] = (), surface: str = "page"
    ) -> str:
        """
        Answer a chat message.

        Args:
            message: New user message
            history: Earlier turns, oldest first
            surface: "quick" or "page"

        Returns:
            Answer or degraded message
        """
        message = (message or "").strip()
        if not message:
            logger.info("Blank chat message", surface=surface)
            return self._errors.empty_message()

        prompt = self._builder.build_chat(message, history, surface)
        logger.info("Chat message received", surface=surface, turns=len(prompt.turns))

        try:
            return await self._invoker.invoke_chat(prompt)
        except ConfigurationError as e:
            log_error(e, "chat_reply", surface=surface)
            return self._errors.configuration_missing()
        except ModelError as e:
            log_error(e, "chat_reply", surface=surface)
            return self._errors.classify(e)
