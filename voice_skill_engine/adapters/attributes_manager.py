"""Session attributes adapter backed by the request envelope.

The platform sends session attributes with every in-session request and
expects them back in the response, so the envelope is the only store.
"""

from __future__ import annotations

from typing import Any

from voice_skill_engine.core.models import RequestEnvelope


class AttributesManager:
    """Implements :class:`~voice_skill_engine.core.ports.AttributesManagerPort`."""

    def __init__(self, request_envelope: RequestEnvelope) -> None:
        session = request_envelope.session
        initial = session.attributes if session is not None else None
        self._session_attributes: dict[str, Any] = dict(initial or {})
        self._has_session = session is not None

    @property
    def has_session(self) -> bool:
        return self._has_session

    @property
    def session_attributes(self) -> dict[str, Any]:
        return self._session_attributes

    def set_session_attributes(self, attributes: dict[str, Any]) -> None:
        if not isinstance(attributes, dict):
            raise TypeError("session attributes must be a dict")
        self._session_attributes = attributes


__all__ = ["AttributesManager"]
