"""
Application configuration management.

Following Sandi Metz principles:
- Single Responsibility: Configuration loading and validation
- Small class: < 100 lines
- Clear naming: Descriptive property names
"""

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Application configuration with validation.

    Loads from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="MentionAssistant", description="Application name")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")
    allowed_origins: str = Field(
        default="http://localhost:5173,http://localhost:8000",
        description="CORS allowed origins",
    )

    # Assistant identity
    assistant_handle: str = Field(default="eduhive", description="Mention handle")
    assistant_name: str = Field(
        default="EduHive Assistant", description="Display name in replies"
    )
    persona: Literal["concise", "thorough"] = Field(
        default="thorough", description="Prompt persona verbosity"
    )

    # Completion service settings
    groq_api_key: str = Field(default="", description="Completion API key")
    llm_base_url: str = Field(
        default="https://api.groq.com/openai/v1", description="OpenAI-compatible URL"
    )
    llm_timeout_seconds: float = Field(default=30.0, gt=0, description="Timeout")
    text_model: str = Field(default="llama-3.1-8b-instant", description="Text model")
    vision_model: str = Field(
        default="llama-3.2-90b-vision-preview", description="Vision model"
    )
    chat_model: str = Field(default="llama-3.3-70b-versatile", description="Chat model")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Temperature")

    # Output budgets per template
    explain_max_tokens: int = Field(default=1000, ge=1, description="Explain tokens")
    question_max_tokens: int = Field(default=800, ge=1, description="Question tokens")
    quick_chat_max_tokens: int = Field(default=400, ge=1, description="Quick tokens")
    page_chat_max_tokens: int = Field(default=1024, ge=1, description="Page tokens")

    # Chat history windows
    quick_chat_history: int = Field(default=8, ge=0, description="Quick history")
    page_chat_history: int = Field(default=10, ge=0, description="Page history")

    # Cache settings
    cache_backend: Literal["memory", "redis"] = Field(
        default="memory", description="Response cache backend"
    )
    cache_ttl_seconds: int = Field(default=3600, ge=1, description="TTL seconds")
    cache_max_entries: int = Field(
        default=1000, ge=1, description="In-memory cache size bound"
    )
    cache_content_prefix: int = Field(default=200, ge=1, description="Key prefix")
    cache_context_prefix: int = Field(default=100, ge=1, description="Key prefix")

    # Redis settings
    redis_host: str = Field(default="localhost", description="Redis host")
    redis_port: int = Field(default=6379, ge=1, le=65535, description="Redis port")
    redis_db: int = Field(default=0, ge=0, le=15, description="Redis database")
    redis_password: str = Field(default="", description="Redis password")
    redis_max_connections: int = Field(default=10, ge=1, description="Max connections")

    @field_validator("assistant_handle")
    @classmethod
    def validate_handle(cls, v: str) -> str:
        """Strip a leading @ and reject empty handles."""
        v = v.strip().lstrip("@")
        if not v:
            raise ValueError("Assistant handle cannot be empty")
        return v

    @property
    def allowed_origins_list(self) -> List[str]:
        """Get allowed origins as list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def redis_url(self) -> str:
        """Build Redis URL."""
        if self.redis_password:
            return (
                f"redis://:{self.redis_password}@"
                f"{self.redis_host}:{self.redis_port}/{self.redis_db}"
            )
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"


# Global configuration instance
config = AppConfig()
