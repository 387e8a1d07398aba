"""Request and response envelope models exchanged with the voice platform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from voice_skill_engine.core.ports import AttributesManagerPort

INTENT_REQUEST = "IntentRequest"
LAUNCH_REQUEST = "LaunchRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"
ELEMENT_SELECTED = "Display.ElementSelected"


class EnvelopeModel(BaseModel):
    """Base model accepting the platform's camelCase keys and unknown fields."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Slot(EnvelopeModel):
    """A named parameter captured from the user's utterance."""

    name: str = ""
    value: Optional[str] = None


class Intent(EnvelopeModel):
    """The classified user goal attached to an intent request."""

    name: str
    confirmation_status: Optional[str] = None
    slots: Optional[dict[str, Slot]] = None


class Request(EnvelopeModel):
    """The request body; which fields are present depends on ``type``."""

    type: str
    request_id: Optional[str] = None
    timestamp: Optional[str] = None
    locale: Optional[str] = None
    intent: Optional[Intent] = None
    token: Optional[str] = None
    reason: Optional[str] = None


class Application(EnvelopeModel):
    application_id: str


class User(EnvelopeModel):
    user_id: str


class Session(EnvelopeModel):
    """Conversation session state carried on every in-session request."""

    new: bool = False
    session_id: Optional[str] = None
    application: Optional[Application] = None
    attributes: Optional[dict[str, Any]] = None
    user: Optional[User] = None


class Device(EnvelopeModel):
    device_id: Optional[str] = None
    supported_interfaces: dict[str, Any] = Field(default_factory=dict)


class SystemState(EnvelopeModel):
    application: Optional[Application] = None
    user: Optional[User] = None
    device: Optional[Device] = None


class Context(EnvelopeModel):
    system: Optional[SystemState] = Field(default=None, alias="System")


class RequestEnvelope(EnvelopeModel):
    """Top-level payload posted by the platform for each user turn."""

    version: str = "1.0"
    session: Optional[Session] = None
    context: Optional[Context] = None
    request: Request

    def application_id(self) -> Optional[str]:
        """Return the skill application id from the context, else from the session."""
        system = self.context.system if self.context else None
        if system and system.application:
            return system.application.application_id
        if self.session and self.session.application:
            return self.session.application.application_id
        return None

    def supported_interfaces(self) -> dict[str, Any]:
        """Return the originating device's capability map (empty when absent)."""
        system = self.context.system if self.context else None
        if system is None or system.device is None:
            return {}
        return system.device.supported_interfaces


class OutputSpeech(EnvelopeModel):
    type: Literal["PlainText", "SSML"] = "PlainText"
    text: Optional[str] = None
    ssml: Optional[str] = None


class Reprompt(EnvelopeModel):
    output_speech: OutputSpeech


class Card(EnvelopeModel):
    type: Literal["Simple"] = "Simple"
    title: Optional[str] = None
    content: Optional[str] = None


class Response(EnvelopeModel):
    """What the device should say or show for this turn."""

    output_speech: Optional[OutputSpeech] = None
    reprompt: Optional[Reprompt] = None
    card: Optional[Card] = None
    should_end_session: Optional[bool] = None


class ResponseEnvelope(EnvelopeModel):
    """Top-level payload returned to the platform."""

    version: str = "1.0"
    session_attributes: dict[str, Any] = Field(default_factory=dict)
    response: Response

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the platform's key names, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(slots=True)
class HandlerInput:
    """Per-request bundle handed to every request handler."""

    request_envelope: RequestEnvelope
    attributes_manager: "AttributesManagerPort"

    @property
    def request(self) -> Request:
        return self.request_envelope.request


__all__ = [
    "ELEMENT_SELECTED",
    "INTENT_REQUEST",
    "LAUNCH_REQUEST",
    "SESSION_ENDED_REQUEST",
    "Application",
    "Card",
    "Context",
    "Device",
    "HandlerInput",
    "Intent",
    "OutputSpeech",
    "Reprompt",
    "Request",
    "RequestEnvelope",
    "Response",
    "ResponseEnvelope",
    "Session",
    "Slot",
    "SystemState",
    "User",
]
