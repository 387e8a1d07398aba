"""Skill endpoint receiving request envelopes from the voice platform."""

from __future__ import annotations

import hmac
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status

from voice_skill_engine.adapters.handler_input import build_handler_input
from voice_skill_engine.core.config import config
from voice_skill_engine.core.exceptions import HandlerNotFoundError
from voice_skill_engine.core.logging import get_logger
from voice_skill_engine.core.models import RequestEnvelope, ResponseEnvelope
from voice_skill_engine.services.request_dispatcher import RequestDispatcher
from voice_skill_engine.services.response_builder import ResponseBuilder

from ..dependencies import get_dispatcher

router = APIRouter(tags=["skill"])
logger = get_logger(__name__)

UNHANDLED_MESSAGE = "Sorry, I didn't get that. Please try again."


def _verify_application_id(envelope: RequestEnvelope) -> None:
    """Reject envelopes addressed to a different skill when an id is configured."""
    expected = config.SKILL_APPLICATION_ID
    if not expected:
        return
    provided = envelope.application_id() or ""
    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("rejected envelope for another application")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Application id mismatch",
        )


@router.post("/skill")
def handle_skill_request(
    envelope: RequestEnvelope,
    dispatcher: Annotated[RequestDispatcher, Depends(get_dispatcher)],
) -> dict[str, Any]:
    """Dispatch one user turn and return the response envelope.

    Session and platform request ids are already bound by ``SkillContextMiddleware``.
    """
    _verify_application_id(envelope)
    handler_input = build_handler_input(envelope)

    try:
        result = dispatcher.dispatch(handler_input)
    except HandlerNotFoundError:
        logger.warning("no handler for request", extra={"request_type": envelope.request.type})
        result = ResponseEnvelope(
            session_attributes=dict(handler_input.attributes_manager.session_attributes),
            response=ResponseBuilder()
            .speak(UNHANDLED_MESSAGE)
            .ask(config.REPROMPT_TEXT)
            .get_response(),
        )
    return result.to_wire()


__all__ = ["router", "UNHANDLED_MESSAGE"]
