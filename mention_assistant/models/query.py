"""
Inbound API request models.

Sandi Metz Principles:
- Small classes focused on data validation
- Clear property names
- Single responsibility per model
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from mention_assistant.models.prompt import ChatTurn
from mention_assistant.models.request import Attachment


class MentionQuery(BaseModel):
    """Text that may mention the assistant, with its surrounding post."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=10000,
        description="Comment or post text to scan for a mention",
        examples=["@eduhive explain"],
    )
    content: Optional[str] = Field(
        None, max_length=20000, description="Body of the post being discussed"
    )
    context: Optional[str] = Field(
        None, max_length=5000, description="Extra context for questions"
    )
    attachments: List[Attachment] = Field(
        default_factory=list, description="Post attachments in display order"
    )


class ChatQuery(BaseModel):
    """Chat message with recent conversation history."""

    message: str = Field(
        ...,
        min_length=1,
        max_length=10000,
        description="New user message",
        examples=["How do I solve 2x + 3 = 7?"],
    )
    history: List[ChatTurn] = Field(
        default_factory=list, description="Earlier turns, oldest first"
    )
    surface: Literal["quick", "page"] = Field(
        default="page", description="Chat surface the message came from"
    )

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Validate and normalize message."""
        v = v.strip()
        if not v:
            raise ValueError("Message cannot be empty")
        return v
