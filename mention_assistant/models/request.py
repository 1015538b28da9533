"""
Assistant request models.

Sandi Metz Principles:
- Small classes focused on data validation
- Clear property names
- Single responsibility per model
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class Intent(str, Enum):
    """Classified purpose of an assistant request."""

    EXPLAIN = "explain"
    QUESTION = "question"
    UNSPECIFIED = "unspecified"


class Attachment(BaseModel):
    """Attachment descriptor resolved by the caller."""

    url: str = Field(..., min_length=1, description="Attachment URL")
    media_type: str = Field(
        default="application/octet-stream",
        description="MIME type",
        examples=["image/png", "application/pdf"],
    )
    name: Optional[str] = Field(None, description="Original file name")

    @property
    def is_image(self) -> bool:
        """Check if attachment is an image."""
        return self.media_type.lower().startswith("image/")


class AssistantRequest(BaseModel):
    """Normalized unit of work for the assistant pipeline."""

    intent: Intent = Field(..., description="Classified intent")
    primary_content: str = Field(
        default="", description="Content to explain or question text"
    )
    auxiliary_context: Optional[str] = Field(
        None, description="Surrounding post or conversation context"
    )
    attachments: List[Attachment] = Field(
        default_factory=list, description="Ordered attachments"
    )

    @model_validator(mode="after")
    def validate_primary_content(self) -> "AssistantRequest":
        """Explain and question requests need content to work on."""
        if self.intent != Intent.UNSPECIFIED and not self.primary_content.strip():
            raise ValueError(f"{self.intent.value} request requires primary content")
        return self

    @property
    def image_attachments(self) -> List[Attachment]:
        """Get image attachments in original order."""
        return [attachment for attachment in self.attachments if attachment.is_image]

    @property
    def has_images(self) -> bool:
        """Check if request carries any image attachment."""
        return any(attachment.is_image for attachment in self.attachments)

    @property
    def is_cacheable(self) -> bool:
        """Self-introductions are never cached."""
        return self.intent != Intent.UNSPECIFIED
