"""Application service layer scaffolding for request handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .request_dispatcher import RequestDispatcher, RequestHandler


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to the API layer."""

    dispatcher: Optional["RequestDispatcher"] = None


def build_default_services(
    *, handlers: Optional[Iterable["RequestHandler"]] = None
) -> ServiceContainer:
    """Return a service container whose dispatcher holds ``handlers`` (none by default)."""

    from .request_dispatcher import RequestDispatcher  # pylint: disable=import-outside-toplevel

    return ServiceContainer(dispatcher=RequestDispatcher(handlers))


__all__ = ["ServiceContainer", "build_default_services"]
