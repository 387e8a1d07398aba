"""Fluent request validator used by handlers to decide whether they apply.

Build a validator for one request, chain the checks a handler needs, then call
:meth:`RequestValidator.can_handle`::

    RequestValidator(request, attributes, interfaces)
        .is_intent("HelloWorldIntent")
        .has_attributes(["name"])
        .or_()
        .is_type("LaunchRequest")
        .can_handle()

Chained checks are AND-ed into the current branch; ``or_()`` opens a new
branch. The request passes when any branch passes in full. Checks are recorded
as predicates and only evaluated by ``can_handle``; evaluation stops at the
first failing predicate of a branch and at the first passing branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Collection, Mapping, Optional

from voice_skill_engine.core.logging import get_logger
from voice_skill_engine.core.models import Request
from voice_skill_engine.services.predicates import (
    DoesNotSupport,
    DoesSupport,
    HasAttributes,
    HasSlots,
    IsIntent,
    IsListSelect,
    IsType,
    Names,
    Predicate,
    RequestFacts,
    as_names,
)

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AllOf:
    """One branch: passes when every predicate passes (empty passes)."""

    predicates: tuple[Predicate, ...]

    def evaluate(self, facts: RequestFacts) -> bool:
        return all(predicate.evaluate(facts) for predicate in self.predicates)

    def describe(self) -> str:
        if not self.predicates:
            return "always"
        return " and ".join(predicate.describe() for predicate in self.predicates)


@dataclass(frozen=True, slots=True)
class AnyOf:
    """The whole chain: passes when at least one branch passes."""

    branches: tuple[AllOf, ...]

    def evaluate(self, facts: RequestFacts) -> bool:
        return any(branch.evaluate(facts) for branch in self.branches)

    def describe(self) -> str:
        return " or ".join(f"({branch.describe()})" for branch in self.branches)


class RequestValidator:
    """Accumulate OR-separated branches of checks against a single request."""

    def __init__(
        self,
        request: Request,
        attributes: Optional[Mapping[str, Any]],
        supported_interfaces: Collection[str],
    ) -> None:
        self._facts = RequestFacts(
            request=request,
            attributes=attributes,
            supported_interfaces=supported_interfaces,
        )
        self._branches: list[list[Predicate]] = [[]]

    @property
    def request(self) -> Request:
        return self._facts.request

    @property
    def attributes(self) -> Optional[Mapping[str, Any]]:
        return self._facts.attributes

    @property
    def supported_interfaces(self) -> Collection[str]:
        return self._facts.supported_interfaces

    @property
    def branch_count(self) -> int:
        return len(self._branches)

    def _add(self, predicate: Predicate) -> "RequestValidator":
        self._branches[-1].append(predicate)
        return self

    def is_type(self, request_type: str) -> "RequestValidator":
        """Require the request type to equal ``request_type`` (e.g. ``"IntentRequest"``)."""
        return self._add(IsType(request_type))

    def is_intent(self, intents: Names) -> "RequestValidator":
        """Require an intent request naming one of ``intents``.

        ``intents`` may be a single intent name or a sequence of names.
        """
        return self._add(IsIntent(as_names(intents)))

    def is_list_select(self, token: str) -> "RequestValidator":
        """Require a ``Display.ElementSelected`` request whose token starts with ``token``.

        Tokens take the form ``tokenName-usersChoice``.
        """
        return self._add(IsListSelect(token))

    def has_attributes(self, attributes: Names) -> "RequestValidator":
        """Require every name in ``attributes`` to be a session attribute key."""
        return self._add(HasAttributes(as_names(attributes)))

    def has_slots(self, slots: Names) -> "RequestValidator":
        """Require every named slot to be present on the intent with a value."""
        return self._add(HasSlots(as_names(slots)))

    def does_support(self, interfaces: Names) -> "RequestValidator":
        """Require the device to support every interface (Display, AudioPlayer, VideoApp)."""
        return self._add(DoesSupport(as_names(interfaces)))

    def does_not_support(self, interfaces: Names) -> "RequestValidator":
        """Require the device to support none of the interfaces."""
        return self._add(DoesNotSupport(as_names(interfaces)))

    def or_(self) -> "RequestValidator":
        """Start a new branch; later checks apply to it alone."""
        self._branches.append([])
        return self

    def expression(self) -> AnyOf:
        """Return an immutable snapshot of the chain built so far."""
        return AnyOf(tuple(AllOf(tuple(branch)) for branch in self._branches))

    def describe(self) -> str:
        return self.expression().describe()

    def can_handle(self) -> bool:
        """Return ``True`` when at least one branch passes every one of its checks."""
        expression = self.expression()
        result = expression.evaluate(self._facts)
        logger.debug(
            "validator decision",
            extra={
                "request_type": self._facts.request.type,
                "rule": expression.describe(),
                "can_handle": result,
            },
        )
        return result


__all__ = ["AllOf", "AnyOf", "RequestValidator"]
