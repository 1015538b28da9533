"""
API dependency injection.

Sandi Metz Principles:
- Single Responsibility: Dependency lookup for routes
- Dependency Inversion: Routes receive services, never build them
"""

from fastapi import HTTPException, Request

from mention_assistant.services.assistant_service import AssistantService
from mention_assistant.services.chat_service import ChatService
from mention_assistant.utils.logger import get_logger

logger = get_logger(__name__)


def _app_state(request: Request):
    state = getattr(request.app.state, "app_state", None)
    if state is None:
        logger.error("Application state not initialized")
        raise HTTPException(status_code=503, detail="Service not ready")
    return state


async def get_assistant_service(request: Request) -> AssistantService:
    """
    Get the mention service built at startup.

    Args:
        request: FastAPI request

    Returns:
        Assistant service instance
    """
    service = _app_state(request).assistant_service
    if service is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return service


async def get_chat_service(request: Request) -> ChatService:
    """
    Get the chat service built at startup.

    Args:
        request: FastAPI request

    Returns:
        Chat service instance
    """
    service = _app_state(request).chat_service
    if service is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return service
