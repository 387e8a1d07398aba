"""FastAPI dependencies for the health probe token and the request dispatcher."""

import hmac
from typing import Annotated, Optional

from fastapi import Header, HTTPException, status

from voice_skill_engine.core.config import config
from voice_skill_engine.services import ServiceContainer, runtime
from voice_skill_engine.services.request_dispatcher import RequestDispatcher


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _presented_health_token(
    authorization: Optional[str], x_health_token: Optional[str]
) -> Optional[str]:
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    if x_health_token:
        return x_health_token.strip() or None
    return None


async def require_healthcheck_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_health_token: Annotated[Optional[str], Header(alias="X-Health-Token")] = None,
) -> None:
    """Guard the liveness probe with ``HEALTHCHECK_API_TOKEN`` when auth is enabled."""
    if not config.HEALTHCHECK_AUTH_ENABLED:
        return
    expected = config.HEALTHCHECK_API_TOKEN
    if not expected:
        raise _unauthorized("Health check token not configured")

    provided = _presented_health_token(authorization, x_health_token)
    if provided is None:
        raise _unauthorized("Missing health check token")
    # Header values may decode to non-ASCII text; compare bytes.
    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        raise _unauthorized("Invalid health check token")


def get_dispatcher() -> RequestDispatcher:
    """Return the request dispatcher of the registered service container."""
    try:
        container: ServiceContainer = runtime.get_services()
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        ) from exc
    if container.dispatcher is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Request dispatcher is unavailable",
        )
    return container.dispatcher


__all__ = ["get_dispatcher", "require_healthcheck_token"]
