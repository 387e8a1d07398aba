"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from voice_skill_engine.services import ServiceContainer, build_default_services
from voice_skill_engine.services.intents import build_default_handlers


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to the skill's handlers."""

    return build_default_services(handlers=build_default_handlers())


__all__ = ["build_default_service_container"]
