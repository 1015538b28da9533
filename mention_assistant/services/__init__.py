"""
Services package.

Orchestration entry points for mentions and chat.
"""

from mention_assistant.services.assistant_service import AssistantService
from mention_assistant.services.chat_service import ChatService
from mention_assistant.services.error_classifier import ErrorClassifier

__all__ = ["AssistantService", "ChatService", "ErrorClassifier"]
