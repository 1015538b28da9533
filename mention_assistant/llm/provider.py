"""
Completion provider base class and interface.

Sandi Metz Principles:
- Single Responsibility: Provider abstraction
- Interface Segregation: Minimal provider interface
- Dependency Inversion: Depend on abstraction, not concrete classes
"""

from abc import ABC, abstractmethod

from mention_assistant.models.llm import LLMResponse
from mention_assistant.models.prompt import BasePrompt


class BaseLLMProvider(ABC):
    """
    Abstract base class for completion providers.

    Defines interface that all providers must implement.
    """

    @abstractmethod
    async def complete(
        self, prompt: BasePrompt, model: str, temperature: float
    ) -> LLMResponse:
        """
        Generate completion for a prompt.

        Args:
            prompt: Prompt to send
            model: Model identifier
            temperature: Sampling temperature

        Returns:
            LLM response

        Raises:
            ModelError: If completion fails
            ConfigurationError: If the provider has no credentials
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name (e.g., "groq")
        """
        pass
