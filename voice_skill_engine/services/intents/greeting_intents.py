"""Greeting handlers, including the name the user asked us to remember."""

from __future__ import annotations

from voice_skill_engine.adapters.handler_input import validator_for
from voice_skill_engine.core.config import config
from voice_skill_engine.core.models import HandlerInput, Response
from voice_skill_engine.services.request_dispatcher import RequestHandler
from voice_skill_engine.services.response_builder import ResponseBuilder

HELLO_WORLD_INTENT = "HelloWorldIntent"
MY_NAME_IS_INTENT = "MyNameIsIntent"
NAME_ATTRIBUTE = "name"
NAME_SLOT = "name"


class GreetByNameHandler(RequestHandler):
    """Registered ahead of :class:`HelloWorldIntentHandler` so a known name wins."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return (
            validator_for(handler_input)
            .is_intent(HELLO_WORLD_INTENT)
            .has_attributes([NAME_ATTRIBUTE])
            .can_handle()
        )

    def handle(self, handler_input: HandlerInput) -> Response:
        name = handler_input.attributes_manager.session_attributes[NAME_ATTRIBUTE]
        text = f"Hello {name}!"
        builder = ResponseBuilder().speak(text).with_simple_card(config.SKILL_NAME, text)
        return builder.get_response()


class HelloWorldIntentHandler(RequestHandler):
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return validator_for(handler_input).is_intent(HELLO_WORLD_INTENT).can_handle()

    def handle(self, handler_input: HandlerInput) -> Response:
        text = "Hello World!"
        builder = ResponseBuilder().speak(text).with_simple_card(config.SKILL_NAME, text)
        return builder.get_response()


class RememberNameHandler(RequestHandler):
    """Store the ``name`` slot in the session for later greetings."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return (
            validator_for(handler_input)
            .is_intent(MY_NAME_IS_INTENT)
            .has_slots([NAME_SLOT])
            .can_handle()
        )

    def handle(self, handler_input: HandlerInput) -> Response:
        intent = handler_input.request.intent
        slots = intent.slots if intent and intent.slots else {}
        name = slots[NAME_SLOT].value
        attributes = handler_input.attributes_manager.session_attributes
        attributes[NAME_ATTRIBUTE] = name
        return (
            ResponseBuilder()
            .speak(f"Nice to meet you, {name}. Say hello and I'll greet you by name.")
            .ask(config.REPROMPT_TEXT)
            .get_response()
        )


__all__ = ["GreetByNameHandler", "HelloWorldIntentHandler", "RememberNameHandler"]
