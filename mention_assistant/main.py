"""
Main FastAPI application.

Following Sandi Metz:
- Single Responsibility: Application setup and configuration
- Small methods: Each lifecycle stage isolated
- Clear naming: Descriptive function names
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.asyncio import ConnectionPool

from mention_assistant import __version__
from mention_assistant.api.middleware import (
    RequestLoggingMiddleware,
    default_logging_config,
)
from mention_assistant.api.routes import assistant, health
from mention_assistant.cache.redis_cache import RedisResponseCache, create_redis_pool
from mention_assistant.cache.response_cache import InMemoryResponseCache, ResponseCache
from mention_assistant.config import AppConfig, config
from mention_assistant.llm.model_invoker import ModelInvoker
from mention_assistant.llm.openai_provider import OpenAIProvider
from mention_assistant.services.assistant_service import AssistantService
from mention_assistant.services.chat_service import ChatService
from mention_assistant.utils.logger import get_logger, setup_logging

setup_logging(config.log_level)
logger = get_logger(__name__)


class ApplicationState:
    """
    Manages application-wide state.

    Single Responsibility: Lifecycle management of shared resources.
    """

    def __init__(self, settings: Optional[AppConfig] = None) -> None:
        self.settings = settings or config
        self.redis_pool: Optional[ConnectionPool] = None
        self.cache: Optional[ResponseCache] = None
        self.provider: Optional[OpenAIProvider] = None
        self.assistant_service: Optional[AssistantService] = None
        self.chat_service: Optional[ChatService] = None

    async def startup(self) -> None:
        """Initialize application resources."""
        logger.info("Starting MentionAssistant", env=self.settings.app_env)
        try:
            self.cache = await self._create_cache()
            self.provider = OpenAIProvider(
                api_key=self.settings.groq_api_key,
                base_url=self.settings.llm_base_url,
                timeout=self.settings.llm_timeout_seconds,
            )
            if not self.provider.is_configured:
                logger.warning("Completion API key missing, replies will be degraded")

            invoker = ModelInvoker(self.provider, self.settings)
            self.assistant_service = AssistantService(
                invoker=invoker, cache=self.cache, settings=self.settings
            )
            self.chat_service = ChatService(invoker=invoker, settings=self.settings)
            logger.info(
                "MentionAssistant started successfully",
                cache_backend=self.settings.cache_backend,
            )
        except Exception as e:
            logger.error("Failed to initialize MentionAssistant", error=str(e))
            raise

    async def shutdown(self) -> None:
        """Cleanup application resources."""
        logger.info("Shutting down MentionAssistant")
        try:
            if self.redis_pool:
                await self.redis_pool.disconnect()
                logger.info("Redis pool closed")
            logger.info("MentionAssistant shut down successfully")
        except Exception as e:
            logger.error("Error during shutdown", error=str(e))

    async def _create_cache(self) -> ResponseCache:
        if self.settings.cache_backend == "redis":
            self.redis_pool = await create_redis_pool()
            logger.info("Redis pool initialized")
            return RedisResponseCache(
                self.redis_pool, ttl_seconds=self.settings.cache_ttl_seconds
            )
        return InMemoryResponseCache(
            ttl_seconds=self.settings.cache_ttl_seconds,
            max_size=self.settings.cache_max_entries,
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    state = ApplicationState()
    await state.startup()
    app.state.app_state = state

    yield

    await state.shutdown()


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=config.app_name,
        description="Mention-driven study assistant replies.",
        version=__version__,
        docs_url="/docs" if config.is_development else None,
        redoc_url="/redoc" if config.is_development else None,
        lifespan=lifespan,
    )

    # Request logging
    app.add_middleware(
        RequestLoggingMiddleware,
        config=default_logging_config,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(assistant.router, prefix="/api/v1", tags=["assistant"])

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mention_assistant.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.is_development,
    )
