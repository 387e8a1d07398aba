"""Boundary between the platform's object graph and the request validator."""

from __future__ import annotations

from voice_skill_engine.adapters.attributes_manager import AttributesManager
from voice_skill_engine.core.models import HandlerInput, RequestEnvelope
from voice_skill_engine.services.validator import RequestValidator


def build_handler_input(request_envelope: RequestEnvelope) -> HandlerInput:
    """Wrap a parsed envelope with an attributes manager seeded from its session."""

    return HandlerInput(
        request_envelope=request_envelope,
        attributes_manager=AttributesManager(request_envelope),
    )


def validator_for(handler_input: HandlerInput) -> RequestValidator:
    """Return a fresh validator over the request, session attributes and device interfaces."""

    envelope = handler_input.request_envelope
    return RequestValidator(
        envelope.request,
        handler_input.attributes_manager.session_attributes,
        envelope.supported_interfaces(),
    )


__all__ = ["build_handler_input", "validator_for"]
