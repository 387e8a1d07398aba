"""Protocol definitions for host-platform collaborators."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Any, Protocol


class AttributesManagerPort(Protocol):
    """Port exposing the session attributes of the conversation in progress."""

    @property
    def session_attributes(self) -> dict[str, Any]:
        """Return the live session attributes mapping."""
        ...

    def set_session_attributes(self, attributes: dict[str, Any]) -> None:
        """Replace the session attributes returned with the response."""
        ...


__all__ = ["AttributesManagerPort"]
