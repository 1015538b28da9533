"""
Assistant mention service.

Orchestrates parsing, cache lookup, prompt building and model invocation.
Always returns displayable text: failures become branded messages.

Sandi Metz Principles:
- Single Responsibility: Mention orchestration
- Small methods: Each method < 10 lines
- Dependency Injection: Invoker, cache and helpers injected
"""

from typing import Optional, Sequence

from mention_assistant.cache.response_cache import ResponseCache
from mention_assistant.config import AppConfig, config
from mention_assistant.exceptions import ConfigurationError, ModelError
from mention_assistant.llm.model_invoker import ModelInvoker
from mention_assistant.llm.prompt_builder import PromptBuilder
from mention_assistant.models.request import AssistantRequest, Attachment
from mention_assistant.models.response import AssistantReply
from mention_assistant.parsing.mention_parser import MentionParser
from mention_assistant.parsing.request_classifier import classify_request
from mention_assistant.services.error_classifier import ErrorClassifier
from mention_assistant.utils.hasher import generate_cache_key
from mention_assistant.utils.logger import (
    get_logger,
    log_cache_hit,
    log_cache_miss,
    log_error,
)

logger = get_logger(__name__)


class AssistantService:
    """
    Main mention processing service.

    Order: parse -> classify -> cache -> prompt -> model -> cache.
    """

    def __init__(
        self,
        invoker: ModelInvoker,
        cache: ResponseCache,
        settings: Optional[AppConfig] = None,
        builder: Optional[PromptBuilder] = None,
        parser: Optional[MentionParser] = None,
        error_classifier: Optional[ErrorClassifier] = None,
    ):
        """
        Initialize service.

        Args:
            invoker: Model invoker
            cache: Response cache shared across requests
            settings: Configuration (uses global config if None)
            builder: Prompt builder (creates default if None)
            parser: Mention parser (creates default if None)
            error_classifier: Error classifier (creates default if None)
        """
        self._settings = settings or config
        self._invoker = invoker
        self._cache = cache
        self._builder = builder or PromptBuilder(self._settings)
        self._parser = parser or MentionParser(self._settings.assistant_handle)
        self._errors = error_classifier or ErrorClassifier(
            self._settings.assistant_name
        )

    @property
    def parser(self) -> MentionParser:
        """Mention parser used by the service."""
        return self._parser

    async def handle_mention(
        self,
        text: str,
        content: Optional[str] = None,
        attachments: Optional[Sequence[Attachment]] = None,
        context: Optional[str] = None,
    ) -> Optional[AssistantReply]:
        """
        Answer a mention found in text.

        Args:
            text: Comment or post text
            content: Body of the post being discussed
            attachments: Post attachments in display order
            context: Extra context for questions

        Returns:
            Assistant reply, or None if the assistant is not mentioned
        """
        parsed = self._parser.parse(text)
        if parsed is None:
            return None

        request = classify_request(parsed, content, attachments, context)
        logger.info(
            "Mention received",
            intent=request.intent.value,
            attachments=len(request.attachments),
        )
        return await self.reply(request)

    async def respond(self, request: AssistantRequest) -> str:
        """
        Answer a request as plain text.

        Args:
            request: Assistant request

        Returns:
            Answer or degraded message
        """
        return (await self.reply(request)).text

    async def reply(self, request: AssistantRequest) -> AssistantReply:
        """
        Answer a request, using the cache when possible.

        Args:
            request: Assistant request

        Returns:
            Assistant reply
        """
        key = self._cache_key(request)

        if key:
            cached = await self._cache.get(key)
            if cached is not None:
                log_cache_hit(key, request.intent.value)
                return AssistantReply(
                    text=cached, intent=request.intent, from_cache=True
                )
            log_cache_miss(key, request.intent.value)

        try:
            text = await self._invoke(request)
        except ConfigurationError as e:
            log_error(e, "assistant_reply", intent=request.intent.value)
            return self._degraded(request, self._errors.configuration_missing(request))
        except ModelError as e:
            log_error(e, "assistant_reply", intent=request.intent.value)
            return self._degraded(request, self._errors.classify(e))

        if key:
            await self._cache.put(key, text)

        return AssistantReply(text=text, intent=request.intent)

    async def _invoke(self, request: AssistantRequest) -> str:
        prompt = self._builder.build(request)
        vision_prompt = self._builder.build_vision(request)
        return await self._invoker.invoke(prompt, vision_prompt)

    def _cache_key(self, request: AssistantRequest) -> Optional[str]:
        if not request.is_cacheable:
            return None
        return generate_cache_key(
            request,
            content_prefix=self._settings.cache_content_prefix,
            context_prefix=self._settings.cache_context_prefix,
        )

    def _degraded(self, request: AssistantRequest, text: str) -> AssistantReply:
        return AssistantReply(text=text, intent=request.intent, degraded=True)
