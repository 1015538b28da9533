"""
OpenAI-compatible completion provider.

Talks to any OpenAI-compatible chat completion endpoint (Groq by default).

Sandi Metz Principles:
- Single Responsibility: Completion API interaction
- Small methods: Each method < 10 lines
- Dependency Injection: API key and base URL injected
"""

from openai import AsyncOpenAI

from mention_assistant.exceptions import ConfigurationError
from mention_assistant.llm.errors import to_model_error
from mention_assistant.llm.provider import BaseLLMProvider
from mention_assistant.models.llm import LLMResponse
from mention_assistant.models.prompt import BasePrompt
from mention_assistant.utils.logger import get_logger, log_llm_call

logger = get_logger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """
    OpenAI-compatible implementation of the completion provider.

    Errors are re-raised as tagged ModelError instances.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float = 30.0,
        name: str = "groq",
    ):
        """
        Initialize provider.

        Args:
            api_key: API key (empty means not configured)
            base_url: OpenAI-compatible endpoint (None for api.openai.com)
            timeout: Transport timeout in seconds
            name: Provider name used in logs
        """
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._name = name
        self._client: AsyncOpenAI | None = None

    @property
    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self._api_key and self._api_key.strip())

    async def complete(
        self, prompt: BasePrompt, model: str, temperature: float
    ) -> LLMResponse:
        """
        Generate completion using the chat completions API.

        Args:
            prompt: Prompt to send
            model: Model identifier
            temperature: Sampling temperature

        Returns:
            LLM response

        Raises:
            ModelError: If API call fails
            ConfigurationError: If no API key is configured
        """
        client = self._get_client()

        try:
            return await self._make_api_call(client, prompt, model, temperature)
        except Exception as e:
            error = to_model_error(e, f"{self._name} API call failed")
            logger.error(
                "Completion error", model=model, kind=error.kind.value, error=str(e)
            )
            raise error from e

    async def _make_api_call(
        self, client: AsyncOpenAI, prompt: BasePrompt, model: str, temperature: float
    ) -> LLMResponse:
        """
        Make chat completion API call.

        Args:
            client: OpenAI async client
            prompt: Prompt to send
            model: Model identifier
            temperature: Sampling temperature

        Returns:
            LLM response
        """
        response = await client.chat.completions.create(
            model=model,
            messages=prompt.to_messages(),
            max_tokens=prompt.max_tokens,
            temperature=temperature,
        )

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""

        llm_response = LLMResponse(
            content=content,
            prompt_tokens=response.usage.prompt_tokens if response.usage else 0,
            completion_tokens=(
                response.usage.completion_tokens if response.usage else 0
            ),
            model=response.model or model,
        )

        log_llm_call(
            model=llm_response.model,
            tokens=llm_response.total_tokens,
            provider=self._name,
        )

        return llm_response

    def get_name(self) -> str:
        """
        Get provider name.

        Returns:
            Provider name
        """
        return self._name

    def _get_client(self) -> AsyncOpenAI:
        """
        Get or create the async client.

        Returns:
            OpenAI async client

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not self.is_configured:
            raise ConfigurationError("Completion API key is not configured")

        if not self._client:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client
