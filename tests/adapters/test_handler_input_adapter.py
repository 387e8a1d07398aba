"""Tests for the handler input adapter and envelope-backed attributes manager."""
# pylint: disable=missing-function-docstring

from __future__ import annotations

import pytest

from voice_skill_engine.adapters import AttributesManager, build_handler_input, validator_for
from voice_skill_engine.core.models import RequestEnvelope


def envelope(**overrides) -> RequestEnvelope:
    payload = {
        "session": {"sessionId": "s-1", "attributes": {"name": "Sam"}},
        "context": {"System": {"device": {"supportedInterfaces": {"Display": {}}}}},
        "request": {"type": "IntentRequest", "intent": {"name": "HelloWorldIntent"}},
    }
    payload.update(overrides)
    return RequestEnvelope.model_validate(payload)


def test_attributes_manager_copies_session_attributes():
    source = envelope()
    manager = AttributesManager(source)

    manager.session_attributes["visits"] = 1

    assert manager.has_session is True
    assert manager.session_attributes == {"name": "Sam", "visits": 1}
    assert source.session is not None
    assert source.session.attributes == {"name": "Sam"}


def test_attributes_manager_without_session_starts_empty():
    manager = AttributesManager(envelope(session=None))

    assert manager.has_session is False
    assert manager.session_attributes == {}


def test_attributes_manager_replaces_attributes():
    manager = AttributesManager(envelope())

    manager.set_session_attributes({"fresh": True})

    assert manager.session_attributes == {"fresh": True}
    with pytest.raises(TypeError):
        manager.set_session_attributes(["not", "a", "dict"])  # type: ignore[arg-type]


def test_validator_for_extracts_request_attributes_and_interfaces():
    handler_input = build_handler_input(envelope())

    validator = validator_for(handler_input)

    assert validator.request is handler_input.request_envelope.request
    assert validator.attributes is handler_input.attributes_manager.session_attributes
    assert "Display" in validator.supported_interfaces
    assert (
        validator.is_intent("HelloWorldIntent")
        .has_attributes(["name"])
        .does_support("Display")
        .can_handle()
        is True
    )


def test_validator_for_tolerates_missing_context():
    handler_input = build_handler_input(envelope(context=None, session=None))

    validator = validator_for(handler_input)

    assert validator.does_not_support(["Display", "VideoApp"]).can_handle() is True
    assert validator_for(handler_input).has_attributes(["name"]).can_handle() is False
