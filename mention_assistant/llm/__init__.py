"""
LLM package.

Prompt construction, provider access and model invocation.
"""

from mention_assistant.llm.fallback_strategy import FallbackStrategy
from mention_assistant.llm.model_invoker import ModelInvoker
from mention_assistant.llm.openai_provider import OpenAIProvider
from mention_assistant.llm.prompt_builder import PromptBuilder
from mention_assistant.llm.provider import BaseLLMProvider

__all__ = [
    "BaseLLMProvider",
    "FallbackStrategy",
    "ModelInvoker",
    "OpenAIProvider",
    "PromptBuilder",
]
