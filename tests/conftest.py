"""
Pytest configuration and fixtures.

Provides common fixtures for testing.
"""

from typing import List, Tuple, Union
from unittest.mock import MagicMock

import pytest

from mention_assistant.config import AppConfig
from mention_assistant.llm.model_invoker import ModelInvoker
from mention_assistant.llm.provider import BaseLLMProvider
from mention_assistant.models.llm import LLMResponse
from mention_assistant.models.prompt import BasePrompt
from mention_assistant.models.request import Attachment

Outcome = Union[str, Exception]


class ScriptedProvider(BaseLLMProvider):
    """
    Provider double that replays scripted outcomes.

    Each call consumes the next outcome: a string is returned as the
    completion text, an exception is raised. The last outcome repeats.
    """

    def __init__(self, *outcomes: Outcome):
        self._outcomes: List[Outcome] = list(outcomes) or ["mock response"]
        self.calls: List[Tuple[BasePrompt, str, float]] = []

    async def complete(
        self, prompt: BasePrompt, model: str, temperature: float
    ) -> LLMResponse:
        self.calls.append((prompt, model, temperature))
        index = min(len(self.calls) - 1, len(self._outcomes) - 1)
        outcome = self._outcomes[index]

        if isinstance(outcome, Exception):
            raise outcome

        return LLMResponse(
            content=outcome, prompt_tokens=10, completion_tokens=5, model=model
        )

    def get_name(self) -> str:
        return "scripted"

    @property
    def models_called(self) -> List[str]:
        return [model for _, model, _ in self.calls]


@pytest.fixture
def test_config() -> AppConfig:
    """
    Create test configuration.

    Returns:
        Test configuration instance
    """
    return AppConfig(
        app_env="development",
        groq_api_key="test-key",
        assistant_handle="eduhive",
        assistant_name="EduHive Assistant",
        persona="thorough",
        text_model="text-model",
        vision_model="vision-model",
        chat_model="chat-model",
        cache_ttl_seconds=60,
    )


@pytest.fixture
def scripted_provider():
    """
    Factory for scripted providers.

    Returns:
        Callable building a ScriptedProvider from outcomes
    """
    return ScriptedProvider


@pytest.fixture
def make_invoker(test_config):
    """
    Factory for invokers around a provider.

    Returns:
        Callable building a ModelInvoker with test configuration
    """

    def _make(provider: BaseLLMProvider) -> ModelInvoker:
        return ModelInvoker(provider, test_config)

    return _make


@pytest.fixture
def fake_clock():
    """
    Controllable clock for TTL tests.

    Returns:
        Mock whose return_value is the current time
    """
    clock = MagicMock()
    clock.return_value = 1_000.0
    return clock


@pytest.fixture
def image_attachments() -> List[Attachment]:
    """
    Two image attachments in display order.

    Returns:
        Attachment list
    """
    return [
        Attachment(url="https://cdn.example.com/a.png", media_type="image/png"),
        Attachment(
            url="https://cdn.example.com/b.jpg", media_type="image/jpeg", name="b.jpg"
        ),
    ]


@pytest.fixture
def document_attachment() -> Attachment:
    """
    Non-image attachment.

    Returns:
        PDF attachment
    """
    return Attachment(
        url="https://cdn.example.com/notes.pdf",
        media_type="application/pdf",
        name="notes.pdf",
    )


@pytest.fixture
def sample_post() -> str:
    """
    Sample post body.

    Returns:
        Post text
    """
    return "Entropy measures how many microstates match a macrostate."
