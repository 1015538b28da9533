"""
API Routes module.

Contains all API endpoint routers.
"""

from mention_assistant.api.routes import assistant, health

__all__ = ["assistant", "health"]
