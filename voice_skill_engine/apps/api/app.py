"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from voice_skill_engine import SKILL_ENGINE_VERSION
from voice_skill_engine.apps.api.middleware import SkillContextMiddleware
from voice_skill_engine.core.config import config
from voice_skill_engine.core.logging import get_logger
from voice_skill_engine.services import ServiceContainer, runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register the service container at startup and log the handler roster."""
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
        dispatcher = services.dispatcher
        handler_names = [h.name for h in dispatcher.handlers()] if dispatcher else []
        logger.info(
            "voice skill engine ready",
            extra={"skill": config.SKILL_NAME, "handlers": handler_names},
        )
    yield


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan, title=config.SKILL_NAME, version=SKILL_ENGINE_VERSION)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(SkillContextMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, skill  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill.router)
    return app


__all__ = ["create_app", "lifespan"]
