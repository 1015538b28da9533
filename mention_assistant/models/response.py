"""
Assistant response models.

Sandi Metz Principles:
- Small classes with clear purpose
- Immutable response data
- Clear naming conventions
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from mention_assistant.models.request import Intent


class AssistantReply(BaseModel):
    """Displayable assistant answer."""

    text: str = Field(..., description="Answer or degraded message")
    intent: Intent = Field(..., description="Classified intent")
    from_cache: bool = Field(default=False, description="Served from cache")
    degraded: bool = Field(default=False, description="Failure message substituted")


class MentionResponse(BaseModel):
    """Mention endpoint response."""

    matched: bool = Field(..., description="Whether the text mentions the assistant")
    intent: Optional[Intent] = Field(None, description="Classified intent")
    reply: Optional[str] = Field(None, description="Assistant reply text")
    cached: bool = Field(default=False, description="Served from cache")
    mentioned_users: List[str] = Field(
        default_factory=list, description="Other users mentioned in the text"
    )

    @classmethod
    def no_mention(cls, mentioned_users: Optional[List[str]] = None) -> "MentionResponse":
        """Create response for text without a mention."""
        return cls(matched=False, mentioned_users=mentioned_users or [])

    @classmethod
    def from_reply(
        cls, reply: AssistantReply, mentioned_users: Optional[List[str]] = None
    ) -> "MentionResponse":
        """Create response from an assistant reply."""
        return cls(
            matched=True,
            intent=reply.intent,
            reply=reply.text,
            cached=reply.from_cache,
            mentioned_users=mentioned_users or [],
        )


class ChatResponse(BaseModel):
    """Chat endpoint response."""

    reply: str = Field(..., description="Assistant reply text")


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"] = Field(..., description="Service status")
    environment: str = Field(..., description="Environment name")
    version: str = Field(..., description="Application version")
