"""Request dispatcher that routes each envelope to the first accepting handler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from voice_skill_engine.core.exceptions import DispatchError, HandlerNotFoundError
from voice_skill_engine.core.logging import get_logger
from voice_skill_engine.core.models import HandlerInput, Response, ResponseEnvelope

logger = get_logger(__name__)


class RequestHandler(ABC):
    """A unit of skill behaviour guarded by a ``can_handle`` check."""

    @abstractmethod
    def can_handle(self, handler_input: HandlerInput) -> bool:
        """Return ``True`` when this handler should answer ``handler_input``."""

    @abstractmethod
    def handle(self, handler_input: HandlerInput) -> Response:
        """Produce the response for ``handler_input``."""

    @property
    def name(self) -> str:
        return type(self).__name__


class RequestDispatcher:
    """Ask handlers in registration order and invoke the first that accepts."""

    def __init__(self, handlers: Iterable[RequestHandler] | None = None) -> None:
        self._handlers: list[RequestHandler] = list(handlers or [])

    def register(self, handler: RequestHandler) -> None:
        """Append ``handler``; earlier registrations take precedence."""

        self._handlers.append(handler)

    def unregister(self, handler: RequestHandler) -> None:
        """Remove a handler if present."""

        if handler in self._handlers:
            self._handlers.remove(handler)

    def handlers(self) -> list[RequestHandler]:
        """Return a shallow copy of the registered handlers, in order."""

        return list(self._handlers)

    def find_handler(self, handler_input: HandlerInput) -> RequestHandler:
        """Return the first handler whose ``can_handle`` is true."""

        for handler in self._handlers:
            if handler.can_handle(handler_input):
                return handler
        raise HandlerNotFoundError(
            f"No handler can handle request type {handler_input.request.type!r}"
        )

    def dispatch(self, handler_input: HandlerInput) -> ResponseEnvelope:
        """Run the accepting handler and wrap its response with the session attributes."""

        handler = self.find_handler(handler_input)
        intent = handler_input.request.intent
        logger.info(
            "dispatching request",
            extra={
                "handler": handler.name,
                "request_type": handler_input.request.type,
                "intent": intent.name if intent else None,
            },
        )
        response = handler.handle(handler_input)
        return ResponseEnvelope(
            session_attributes=dict(handler_input.attributes_manager.session_attributes),
            response=response,
        )


__all__ = [
    "DispatchError",
    "HandlerNotFoundError",
    "RequestDispatcher",
    "RequestHandler",
]
