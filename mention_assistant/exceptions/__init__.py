"""
Custom exceptions for the application.
"""

from mention_assistant.models.error import ModelErrorKind


class AppError(Exception):
    """Base exception for application errors."""

    pass


class ModelError(AppError):
    """Raised when a completion call fails."""

    def __init__(self, kind: ModelErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind

    def __repr__(self) -> str:
        return f"ModelError(kind={self.kind.value!r}, message={str(self)!r})"


class ConfigurationError(AppError):
    """Raised when required configuration is missing or invalid."""

    pass
