"""
Assistant endpoints.

Sandi Metz Principles:
- Single Responsibility: HTTP request handling
- Small functions: Minimal logic in endpoints
- Dependency Injection: Services injected
"""

from fastapi import APIRouter, Depends

from mention_assistant.api.deps import get_assistant_service, get_chat_service
from mention_assistant.models.query import ChatQuery, MentionQuery
from mention_assistant.models.response import ChatResponse, MentionResponse
from mention_assistant.services.assistant_service import AssistantService
from mention_assistant.services.chat_service import ChatService

router = APIRouter(prefix="/assistant")


@router.post("/mention", response_model=MentionResponse)
async def answer_mention(
    query: MentionQuery,
    service: AssistantService = Depends(get_assistant_service),  # noqa: B008
) -> MentionResponse:
    """
    Answer an assistant mention.

    Args:
        query: Text with optional post content and attachments
        service: Assistant service (injected)

    Returns:
        Reply, or matched=false when the assistant is not mentioned
    """
    mentioned_users = service.parser.extract_user_mentions(query.text)
    reply = await service.handle_mention(
        query.text,
        content=query.content,
        attachments=query.attachments,
        context=query.context,
    )
    if reply is None:
        return MentionResponse.no_mention(mentioned_users)
    return MentionResponse.from_reply(reply, mentioned_users)


@router.post("/chat", response_model=ChatResponse)
async def answer_chat(
    query: ChatQuery,
    service: ChatService = Depends(get_chat_service),  # noqa: B008
) -> ChatResponse:
    """
    Answer a chat message.

    Args:
        query: Message, history and surface
        service: Chat service (injected)

    Returns:
        Reply text
    """
    reply = await service.reply(query.message, query.history, query.surface)
    return ChatResponse(reply=reply)
