"""Data models for the assistant pipeline."""

from mention_assistant.models.cache_entry import CacheEntry
from mention_assistant.models.error import ModelErrorKind
from mention_assistant.models.prompt import (
    ChatPrompt,
    ChatTurn,
    PromptSpec,
    VisionPrompt,
)
from mention_assistant.models.request import AssistantRequest, Attachment, Intent
from mention_assistant.models.response import AssistantReply

__all__ = [
    "AssistantReply",
    "AssistantRequest",
    "Attachment",
    "CacheEntry",
    "ChatPrompt",
    "ChatTurn",
    "Intent",
    "ModelErrorKind",
    "PromptSpec",
    "VisionPrompt",
]
