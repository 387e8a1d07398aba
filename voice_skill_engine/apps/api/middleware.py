"""ASGI middleware binding per-turn log context from the skill request envelope."""

from __future__ import annotations

import json
import time
import uuid
from typing import Any, Optional

from voice_skill_engine.core.logging import (
    correlation_id_context,
    get_logger,
    request_id_context,
    session_id_context,
)

logger = get_logger(__name__)


def envelope_ids(body: bytes) -> tuple[Optional[str], Optional[str]]:
    """Return ``(request_id, session_id)`` from a raw envelope body, if present.

    Anything that is not a JSON envelope yields ``(None, None)``; body
    validation is left to the route.
    """
    try:
        payload = json.loads(body) if body else None
    except (ValueError, UnicodeDecodeError):
        return None, None
    if not isinstance(payload, dict):
        return None, None

    request = payload.get("request")
    session = payload.get("session")
    request_id = request.get("requestId") if isinstance(request, dict) else None
    session_id = session.get("sessionId") if isinstance(session, dict) else None
    return (
        request_id if isinstance(request_id, str) else None,
        session_id if isinstance(session_id, str) else None,
    )


class SkillContextMiddleware:  # pylint: disable=too-few-public-methods
    """Bind correlation, session and platform request ids for each skill turn.

    The correlation id comes from ``X-Request-ID``/``X-Correlation-ID``, else the
    envelope's ``requestId``, else a fresh uuid, and is echoed in the response.
    """

    header_names = ("X-Request-ID", "X-Correlation-ID")

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        headers = {
            k.decode("latin-1").lower(): v.decode("latin-1") for k, v in scope.get("headers", [])
        }
        buffered: list[dict[str, Any]] = []
        request_id = session_id = None
        if scope.get("method") == "POST":
            body = await self._buffer_body(receive, buffered)
            request_id, session_id = envelope_ids(body)
        correlation_id = self._header_correlation_id(headers) or request_id or uuid.uuid4().hex
        echoed_id = correlation_id.encode("latin-1", "replace")

        async def replay_receive():  # type: ignore[no-untyped-def]
            if buffered:
                return buffered.pop(0)
            return await receive()

        status_code: int | None = None

        async def send_wrapper(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = message.get("status")
                header_list = list(message.get("headers", []))
                existing = {key.decode("latin-1").lower() for key, _ in header_list}
                for header in self.header_names:
                    if header.lower() not in existing:
                        header_list.append((header.encode(), echoed_id))
                message["headers"] = header_list
            await send(message)

        start_time = time.perf_counter()
        with (
            correlation_id_context(correlation_id),
            session_id_context(session_id),
            request_id_context(request_id),
        ):
            try:
                await self.app(scope, replay_receive, send_wrapper)
            finally:
                logger.info(
                    "request completed",
                    extra={
                        "event": "http_request",
                        "path": scope.get("path", ""),
                        "method": scope.get("method", ""),
                        "status_code": status_code or 500,
                        "duration_ms": round((time.perf_counter() - start_time) * 1000.0, 2),
                    },
                )

    @staticmethod
    async def _buffer_body(receive, buffered: list[dict[str, Any]]) -> bytes:
        chunks: list[bytes] = []
        while True:
            message = await receive()
            buffered.append(message)
            if message.get("type") != "http.request":
                break
            chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                break
        return b"".join(chunks)

    def _header_correlation_id(self, header_map: dict[str, str]) -> Optional[str]:
        for header in self.header_names:
            value = header_map.get(header.lower())
            if value:
                return value
        return None


__all__ = ["SkillContextMiddleware", "envelope_ids"]
