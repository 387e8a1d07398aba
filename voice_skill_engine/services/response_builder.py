"""Fluent builder for the speech, reprompt and card returned to the device."""

from __future__ import annotations

from typing import Optional

from voice_skill_engine.core.models import Card, OutputSpeech, Reprompt, Response


def _speech(text: str) -> OutputSpeech:
    if text.lstrip().startswith("<speak>"):
        return OutputSpeech(type="SSML", ssml=text)
    return OutputSpeech(type="PlainText", text=text)


class ResponseBuilder:
    """Collect response parts, then call :meth:`get_response`."""

    def __init__(self) -> None:
        self._output_speech: Optional[OutputSpeech] = None
        self._reprompt: Optional[Reprompt] = None
        self._card: Optional[Card] = None
        self._should_end_session: Optional[bool] = None

    def speak(self, text: str) -> "ResponseBuilder":
        """Say ``text``; markup wrapped in ``<speak>`` is sent as SSML."""
        self._output_speech = _speech(text)
        return self

    def ask(self, reprompt_text: str) -> "ResponseBuilder":
        """Reprompt with ``reprompt_text`` and keep the session open."""
        self._reprompt = Reprompt(output_speech=_speech(reprompt_text))
        self._should_end_session = False
        return self

    def with_simple_card(self, title: str, content: str) -> "ResponseBuilder":
        self._card = Card(title=title, content=content)
        return self

    def set_should_end_session(self, should_end_session: bool) -> "ResponseBuilder":
        self._should_end_session = should_end_session
        return self

    def get_response(self) -> Response:
        return Response(
            output_speech=self._output_speech,
            reprompt=self._reprompt,
            card=self._card,
            should_end_session=self._should_end_session,
        )


__all__ = ["ResponseBuilder"]
