"""Sample skill handlers and their registration order."""

from __future__ import annotations

from voice_skill_engine.services.request_dispatcher import RequestHandler

from .builtin_intents import (
    CancelAndStopIntentHandler,
    FallbackIntentHandler,
    HelpIntentHandler,
    LaunchRequestHandler,
    SessionEndedRequestHandler,
)
from .greeting_intents import GreetByNameHandler, HelloWorldIntentHandler, RememberNameHandler
from .list_intents import ItemSelectedHandler, ReadItemsAloudHandler, ShowItemsOnDisplayHandler


def build_default_handlers() -> list[RequestHandler]:
    """Return the skill's handlers; the first one that accepts a request wins."""
    return [
        LaunchRequestHandler(),
        GreetByNameHandler(),
        HelloWorldIntentHandler(),
        RememberNameHandler(),
        ShowItemsOnDisplayHandler(),
        ReadItemsAloudHandler(),
        ItemSelectedHandler(),
        HelpIntentHandler(),
        CancelAndStopIntentHandler(),
        SessionEndedRequestHandler(),
        FallbackIntentHandler(),
    ]


__all__ = ["build_default_handlers"]
