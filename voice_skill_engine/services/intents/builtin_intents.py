"""Handlers for platform-defined requests: launch, help, stop, fallback, session end."""

from __future__ import annotations

from voice_skill_engine.adapters.handler_input import validator_for
from voice_skill_engine.core.config import config
from voice_skill_engine.core.logging import get_logger
from voice_skill_engine.core.models import (
    LAUNCH_REQUEST,
    SESSION_ENDED_REQUEST,
    HandlerInput,
    Response,
)
from voice_skill_engine.services.request_dispatcher import RequestHandler
from voice_skill_engine.services.response_builder import ResponseBuilder

logger = get_logger(__name__)

HELP_INTENT = "AMAZON.HelpIntent"
CANCEL_INTENT = "AMAZON.CancelIntent"
STOP_INTENT = "AMAZON.StopIntent"
FALLBACK_INTENT = "AMAZON.FallbackIntent"

HELP_MESSAGE = (
    "You can say hello, tell me your name, or ask me to show the items. "
    "What would you like to do?"
)
GOODBYE_MESSAGE = "Goodbye!"
FALLBACK_MESSAGE = "Sorry, I can't help with that. You can say hello or ask for help."


class LaunchRequestHandler(RequestHandler):
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return validator_for(handler_input).is_type(LAUNCH_REQUEST).can_handle()

    def handle(self, handler_input: HandlerInput) -> Response:
        text = f"Welcome to {config.SKILL_NAME}. You can say hello or ask for help."
        return (
            ResponseBuilder()
            .speak(text)
            .ask(config.REPROMPT_TEXT)
            .with_simple_card(config.SKILL_NAME, text)
            .get_response()
        )


class HelpIntentHandler(RequestHandler):
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return validator_for(handler_input).is_intent(HELP_INTENT).can_handle()

    def handle(self, handler_input: HandlerInput) -> Response:
        return ResponseBuilder().speak(HELP_MESSAGE).ask(HELP_MESSAGE).get_response()


class CancelAndStopIntentHandler(RequestHandler):
    """Either built-in exit intent ends the session."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return validator_for(handler_input).is_intent([CANCEL_INTENT, STOP_INTENT]).can_handle()

    def handle(self, handler_input: HandlerInput) -> Response:
        return (
            ResponseBuilder()
            .speak(GOODBYE_MESSAGE)
            .with_simple_card(config.SKILL_NAME, GOODBYE_MESSAGE)
            .set_should_end_session(True)
            .get_response()
        )


class FallbackIntentHandler(RequestHandler):
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return validator_for(handler_input).is_intent(FALLBACK_INTENT).can_handle()

    def handle(self, handler_input: HandlerInput) -> Response:
        return ResponseBuilder().speak(FALLBACK_MESSAGE).ask(config.REPROMPT_TEXT).get_response()


class SessionEndedRequestHandler(RequestHandler):
    """The platform ignores any speech returned for a session-ended request."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return validator_for(handler_input).is_type(SESSION_ENDED_REQUEST).can_handle()

    def handle(self, handler_input: HandlerInput) -> Response:
        logger.info("session ended", extra={"reason": handler_input.request.reason})
        return ResponseBuilder().get_response()


__all__ = [
    "CancelAndStopIntentHandler",
    "FallbackIntentHandler",
    "HelpIntentHandler",
    "LaunchRequestHandler",
    "SessionEndedRequestHandler",
]
