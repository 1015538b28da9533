"""
LLM response models.

Sandi Metz Principles:
- Small classes focused on LLM interaction
- Immutable data structures
"""

from pydantic import BaseModel, Field


class LLMResponse(BaseModel):
    """Completion service response."""

    content: str = Field(..., description="Response content")
    prompt_tokens: int = Field(default=0, description="Prompt tokens", ge=0)
    completion_tokens: int = Field(default=0, description="Completion tokens", ge=0)
    model: str = Field(..., description="Model used")

    @property
    def total_tokens(self) -> int:
        """Calculate total tokens."""
        return self.prompt_tokens + self.completion_tokens

    @property
    def is_empty(self) -> bool:
        """Check if the model returned no usable text."""
        return not self.content.strip()
