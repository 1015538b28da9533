"""
Prompt models sent to the completion service.

Sandi Metz Principles:
- Small classes focused on message construction
- Immutable data structures
- Clear separation of text, vision and chat prompts
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

Message = Dict[str, Any]


class BasePrompt(BaseModel):
    """Common fields for every prompt variant."""

    model_config = ConfigDict(frozen=True)

    system_role: str = Field(..., min_length=1, description="System persona")
    max_tokens: int = Field(..., ge=1, description="Output budget")

    def to_messages(self) -> List[Message]:
        """Build role-tagged messages for a chat completion call."""
        raise NotImplementedError


class PromptSpec(BasePrompt):
    """Text-only prompt: one system turn and one user turn."""

    user_role: str = Field(..., min_length=1, description="User turn")

    def to_messages(self) -> List[Message]:
        return [
            {"role": "system", "content": self.system_role},
            {"role": "user", "content": self.user_role},
        ]


class VisionPrompt(BasePrompt):
    """Multimodal prompt: text instruction followed by image parts."""

    text: str = Field(..., min_length=1, description="Text instruction")
    image_urls: List[str] = Field(..., min_length=1, description="Images in order")

    def content_parts(self) -> List[Message]:
        """Build the ordered multi-part user content."""
        parts: List[Message] = [{"type": "text", "text": self.text}]
        parts.extend(
            {"type": "image_url", "image_url": {"url": url}} for url in self.image_urls
        )
        return parts

    def to_messages(self) -> List[Message]:
        return [
            {"role": "system", "content": self.system_role},
            {"role": "user", "content": self.content_parts()},
        ]


class ChatTurn(BaseModel):
    """Single turn of a chat conversation."""

    role: Literal["user", "assistant"] = Field(..., description="Speaker")
    content: str = Field(..., min_length=1, description="Turn text")


class ChatPrompt(BasePrompt):
    """Conversational prompt with a bounded history window."""

    turns: List[ChatTurn] = Field(..., min_length=1, description="History + message")

    def to_messages(self) -> List[Message]:
        messages: List[Message] = [{"role": "system", "content": self.system_role}]
        messages.extend({"role": t.role, "content": t.content} for t in self.turns)
        return messages
