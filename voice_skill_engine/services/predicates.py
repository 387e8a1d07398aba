"""Predicates evaluated by the request validator.

Each predicate is a small immutable value that knows how to test one rule
against :class:`RequestFacts`. Missing request data (no intent, no slots, no
token, no attributes) is an ordinary failure, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Collection, Iterable, Mapping, Optional, Protocol, Union

from voice_skill_engine.core.models import ELEMENT_SELECTED, INTENT_REQUEST, Request

LIST_TOKEN_DELIMITER = "-"

Names = Union[str, Iterable[str]]


def as_names(value: Names) -> tuple[str, ...]:
    """Normalize a single name or an iterable of names into a tuple.

    A bare string is one name, never a sequence of characters.
    """
    if isinstance(value, str):
        return (value,)
    try:
        names = tuple(value)
    except TypeError as exc:
        raise TypeError(f"expected a name or an iterable of names, got {value!r}") from exc
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"names must be strings, got {name!r}")
    return names


@dataclass(frozen=True, slots=True, eq=False)
class RequestFacts:
    """The three inputs a validator reads; held by reference, never mutated."""

    request: Request
    attributes: Optional[Mapping[str, Any]]
    supported_interfaces: Collection[str]


class Predicate(Protocol):
    """A single pass/fail rule over request facts."""

    def evaluate(self, facts: RequestFacts) -> bool:
        """Return ``True`` when ``facts`` satisfy the rule."""
        ...

    def describe(self) -> str:
        """Return a short human-readable rendering for logs."""
        ...


@dataclass(frozen=True, slots=True)
class IsType:
    request_type: str

    def evaluate(self, facts: RequestFacts) -> bool:
        return facts.request.type == self.request_type

    def describe(self) -> str:
        return f"is_type({self.request_type!r})"


@dataclass(frozen=True, slots=True)
class IsIntent:
    """Intent request whose intent name is one of ``names``."""

    names: tuple[str, ...]

    def evaluate(self, facts: RequestFacts) -> bool:
        request = facts.request
        if request.type != INTENT_REQUEST or request.intent is None:
            return False
        return request.intent.name in self.names

    def describe(self) -> str:
        return f"is_intent({list(self.names)!r})"


@dataclass(frozen=True, slots=True)
class IsListSelect:
    """Selection from a visual list whose token is ``<name>-<choice>``."""

    name: str

    def evaluate(self, facts: RequestFacts) -> bool:
        request = facts.request
        if request.type != ELEMENT_SELECTED or not request.token:
            return False
        return request.token.split(LIST_TOKEN_DELIMITER, 1)[0] == self.name

    def describe(self) -> str:
        return f"is_list_select({self.name!r})"


@dataclass(frozen=True, slots=True)
class HasAttributes:
    """Every name is present as a session attribute key; values are not checked."""

    names: tuple[str, ...]

    def evaluate(self, facts: RequestFacts) -> bool:
        attributes = facts.attributes or {}
        return all(name in attributes for name in self.names)

    def describe(self) -> str:
        return f"has_attributes({list(self.names)!r})"


@dataclass(frozen=True, slots=True)
class HasSlots:
    """Every named slot exists on the intent and holds a non-empty value."""

    names: tuple[str, ...]

    def evaluate(self, facts: RequestFacts) -> bool:
        intent = facts.request.intent
        if intent is None or intent.slots is None:
            return False
        for name in self.names:
            slot = intent.slots.get(name)
            if slot is None or not slot.value:
                return False
        return True

    def describe(self) -> str:
        return f"has_slots({list(self.names)!r})"


@dataclass(frozen=True, slots=True)
class DoesSupport:
    names: tuple[str, ...]

    def evaluate(self, facts: RequestFacts) -> bool:
        return all(name in facts.supported_interfaces for name in self.names)

    def describe(self) -> str:
        return f"does_support({list(self.names)!r})"


@dataclass(frozen=True, slots=True)
class DoesNotSupport:
    names: tuple[str, ...]

    def evaluate(self, facts: RequestFacts) -> bool:
        return not any(name in facts.supported_interfaces for name in self.names)

    def describe(self) -> str:
        return f"does_not_support({list(self.names)!r})"


__all__ = [
    "LIST_TOKEN_DELIMITER",
    "DoesNotSupport",
    "DoesSupport",
    "HasAttributes",
    "HasSlots",
    "IsIntent",
    "IsListSelect",
    "IsType",
    "Names",
    "Predicate",
    "RequestFacts",
    "as_names",
]
