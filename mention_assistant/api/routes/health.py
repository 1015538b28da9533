"""
Health check endpoints.

Sandi Metz Principles:
- Single Responsibility: Health check logic only
- Small functions: Each check isolated
- Clear naming: Descriptive endpoint names
"""

import time
from typing import Dict, Literal, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from mention_assistant import __version__
from mention_assistant.cache.redis_cache import RedisResponseCache
from mention_assistant.config import config
from mention_assistant.models.response import HealthResponse
from mention_assistant.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


class ComponentHealth(BaseModel):
    """Health status of a component."""

    status: Literal["healthy", "unhealthy", "degraded"] = Field(
        ..., description="Component status"
    )
    latency_ms: Optional[float] = Field(None, description="Check latency in ms")
    message: Optional[str] = Field(None, description="Status message")


class DetailedHealthResponse(BaseModel):
    """Detailed health check response."""

    status: Literal["healthy", "unhealthy", "degraded"] = Field(
        ..., description="Overall status"
    )
    environment: str = Field(..., description="Environment name")
    version: str = Field(..., description="Application version")
    components: Dict[str, ComponentHealth] = Field(
        default_factory=dict, description="Component health status"
    )


async def check_cache_health(request: Request) -> ComponentHealth:
    """Check response cache health."""
    app_state = getattr(request.app.state, "app_state", None)
    if app_state is None or app_state.cache is None:
        return ComponentHealth(status="unhealthy", message="Cache not initialized")

    if not isinstance(app_state.cache, RedisResponseCache):
        return ComponentHealth(status="healthy", message="In-memory cache")

    start = time.time()
    is_healthy = await app_state.cache.ping()
    latency = (time.time() - start) * 1000

    if is_healthy:
        return ComponentHealth(status="healthy", latency_ms=round(latency, 2))
    return ComponentHealth(status="unhealthy", message="Ping failed")


def check_llm_health(request: Request) -> ComponentHealth:
    """Check completion provider configuration."""
    app_state = getattr(request.app.state, "app_state", None)
    if app_state is None or app_state.provider is None:
        return ComponentHealth(status="unhealthy", message="Provider not initialized")

    if not app_state.provider.is_configured:
        return ComponentHealth(status="degraded", message="API key not configured")

    return ComponentHealth(status="healthy")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns:
        Health status response
    """
    return HealthResponse(
        status="healthy",
        environment=config.app_env,
        version=__version__,
    )


@router.get("/live", response_model=HealthResponse)
async def liveness_check() -> HealthResponse:
    """
    Kubernetes liveness probe endpoint.

    Always returns healthy if the application is running.

    Returns:
        Health status response
    """
    return await health_check()


@router.get("/ready", response_model=DetailedHealthResponse)
async def readiness_check(request: Request) -> DetailedHealthResponse:
    """
    Kubernetes-style readiness check endpoint.

    Returns:
        Detailed health status response
    """
    components = {
        "cache": await check_cache_health(request),
        "llm": check_llm_health(request),
    }

    statuses = [c.status for c in components.values()]
    if all(s == "healthy" for s in statuses):
        overall_status = "healthy"
    elif any(s == "unhealthy" for s in statuses):
        overall_status = "unhealthy"
    else:
        overall_status = "degraded"

    return DetailedHealthResponse(
        status=overall_status,
        environment=config.app_env,
        version=__version__,
        components=components,
    )
