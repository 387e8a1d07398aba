"""Unit tests for the request dispatcher."""
# pylint: disable=missing-function-docstring

from __future__ import annotations

import pytest

from voice_skill_engine.adapters import build_handler_input, validator_for
from voice_skill_engine.core.models import HandlerInput, RequestEnvelope, Response
from voice_skill_engine.services import ServiceContainer, build_default_services
from voice_skill_engine.services.request_dispatcher import (
    DispatchError,
    HandlerNotFoundError,
    RequestDispatcher,
    RequestHandler,
)
from voice_skill_engine.services.response_builder import ResponseBuilder


class EchoIntentHandler(RequestHandler):
    """Answers a fixed intent by speaking its own label."""

    def __init__(self, intent: str, label: str) -> None:
        self.intent = intent
        self.label = label
        self.calls = 0

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return validator_for(handler_input).is_intent(self.intent).can_handle()

    def handle(self, handler_input: HandlerInput) -> Response:
        self.calls += 1
        handler_input.attributes_manager.session_attributes["handled_by"] = self.label
        return ResponseBuilder().speak(self.label).get_response()


def intent_input(name: str) -> HandlerInput:
    return build_handler_input(
        RequestEnvelope.model_validate(
            {
                "session": {"sessionId": "s", "attributes": {"turn": 1}},
                "request": {"type": "IntentRequest", "intent": {"name": name}},
            }
        )
    )


def test_dispatch_invokes_first_accepting_handler():
    first = EchoIntentHandler("HelloWorldIntent", "first")
    second = EchoIntentHandler("HelloWorldIntent", "second")
    dispatcher = RequestDispatcher([first, second])

    envelope = dispatcher.dispatch(intent_input("HelloWorldIntent"))

    assert envelope.response.output_speech is not None
    assert envelope.response.output_speech.text == "first"
    assert envelope.session_attributes == {"turn": 1, "handled_by": "first"}
    assert (first.calls, second.calls) == (1, 0)


def test_dispatch_unknown_request_raises():
    dispatcher = RequestDispatcher([EchoIntentHandler("HelloWorldIntent", "hello")])

    with pytest.raises(HandlerNotFoundError):
        dispatcher.dispatch(intent_input("OtherIntent"))
    assert issubclass(HandlerNotFoundError, DispatchError)


def test_register_and_unregister_preserve_order():
    dispatcher = RequestDispatcher()
    a = EchoIntentHandler("A", "a")
    b = EchoIntentHandler("B", "b")

    dispatcher.register(a)
    dispatcher.register(b)
    assert dispatcher.handlers() == [a, b]

    dispatcher.unregister(a)
    dispatcher.unregister(a)
    assert dispatcher.handlers() == [b]
    assert dispatcher.find_handler(intent_input("B")) is b


def test_handler_name_defaults_to_class_name():
    assert EchoIntentHandler("A", "a").name == "EchoIntentHandler"


def test_build_default_services_provisions_dispatcher():
    services = build_default_services()

    assert isinstance(services, ServiceContainer)
    assert services.dispatcher is not None
    assert services.dispatcher.handlers() == []
