"""
Model invoker.

Selects the model for a prompt, issues the completion call and applies the
vision-to-text fallback.

Sandi Metz Principles:
- Single Responsibility: Model selection and invocation
- Dependency Injection: Provider and fallback strategy injected
- Small methods: Each method < 10 lines
"""

from typing import Optional

from mention_assistant.config import AppConfig, config
from mention_assistant.exceptions import ModelError
from mention_assistant.llm.fallback_strategy import FallbackStrategy
from mention_assistant.llm.provider import BaseLLMProvider
from mention_assistant.models.error import ModelErrorKind
from mention_assistant.models.prompt import (
    BasePrompt,
    ChatPrompt,
    PromptSpec,
    VisionPrompt,
)
from mention_assistant.utils.logger import get_logger

logger = get_logger(__name__)


class ModelInvoker:
    """
    Invokes the completion provider with the right model.

    No retries happen beyond the single vision-to-text fallback.
    """

    def __init__(
        self,
        provider: BaseLLMProvider,
        settings: Optional[AppConfig] = None,
        fallback: Optional[FallbackStrategy] = None,
    ):
        """
        Initialize invoker.

        Args:
            provider: Completion provider
            settings: Configuration (uses global config if None)
            fallback: Fallback strategy (creates default if None)
        """
        self._provider = provider
        self._settings = settings or config
        self._fallback = fallback or FallbackStrategy()

    async def invoke(
        self, prompt: PromptSpec, vision_prompt: Optional[VisionPrompt] = None
    ) -> str:
        """
        Invoke the model for a mention prompt.

        With a vision prompt, the vision model is tried first and the text
        prompt is the fallback.

        Args:
            prompt: Text-only prompt
            vision_prompt: Multimodal prompt, if the request has images

        Returns:
            Model answer text

        Raises:
            ModelError: If every attempt fails
        """
        if vision_prompt is None:
            return await self.attempt(prompt, self._settings.text_model)

        return await self._fallback.execute(
            lambda: self.attempt(vision_prompt, self._settings.vision_model),
            lambda: self.attempt(prompt, self._settings.text_model),
            primary_name="vision",
            fallback_name="text",
        )

    async def invoke_chat(self, prompt: ChatPrompt) -> str:
        """
        Invoke the chat model for a conversation.

        Args:
            prompt: Chat prompt

        Returns:
            Model answer text

        Raises:
            ModelError: If the call fails
        """
        return await self.attempt(prompt, self._settings.chat_model)

    async def attempt(self, prompt: BasePrompt, model: str) -> str:
        """
        Make a single completion attempt.

        Args:
            prompt: Prompt to send
            model: Model identifier

        Returns:
            First choice text

        Raises:
            ModelError: If the call fails or returns no text
        """
        response = await self._provider.complete(
            prompt, model=model, temperature=self._settings.temperature
        )

        if response.is_empty:
            logger.warning("Empty completion", model=model)
            raise ModelError(
                ModelErrorKind.EMPTY_RESPONSE, f"No response from model {model}"
            )

        return response.content
