"""Fluent first-match-wins resolution of a subject against ordered rules."""

from __future__ import annotations

import dataclasses
import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Union

from . import pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Immediate:
    """A handler output that is already available."""

    value: Any

    def settle(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Deferred:
    """A handler output that completes later (a coroutine, future or task)."""

    awaitable: Awaitable

    def settle(self) -> Awaitable:
        # always a fresh coroutine, even when the handler returned a future
        return _settle(self.awaitable)


Outcome = Union[Immediate, Deferred]


async def _settle(awaitable: Awaitable) -> Any:
    return await awaitable


def capture(handler: Callable[[Any], Any], subject: Any) -> Outcome:
    """Run handler on subject and tag its output as immediate or deferred.

    Coroutine functions are deferred by declaration; anything else is deferred
    only if what it returned is awaitable.
    """
    output = handler(subject)
    if inspect.iscoroutinefunction(handler) or inspect.isawaitable(output):
        return Deferred(output)
    return Immediate(output)


@dataclass(frozen=True)
class Matcher:
    """Resolution chain for a single subject.

    Every chaining call returns a new Matcher; the receiver is never changed.
    At most one handler runs along a chain: the first rule that holds fires,
    and every later rule, including the fallback, is skipped.
    """

    subject: Any
    outcome: Outcome | None = None

    @property
    def resolved(self) -> bool:
        return self.outcome is not None

    @property
    def is_deferred(self) -> bool:
        return isinstance(self.outcome, Deferred)

    def _fire(self, handler: Callable[[Any], Any], rule: str) -> Matcher:
        logger.debug("rule %s fired for %r", rule, self.subject)
        return dataclasses.replace(self, outcome=capture(handler, self.subject))

    def with_pattern(self, pat: Any, handler: Callable[[Any], Any]) -> Matcher:
        """Fire handler if the subject structurally matches pat."""
        if self.resolved or not pattern.matches(self.subject, pat):
            return self
        return self._fire(handler, f"pattern {pat!r}")

    def with_predicate(self, predicate: Callable[[Any], Any], handler: Callable[[Any], Any]) -> Matcher:
        """Fire handler if predicate(subject) is truthy."""
        if self.resolved or not predicate(self.subject):
            return self
        name = getattr(predicate, "__name__", repr(predicate))
        return self._fire(handler, f"predicate {name}")

    def resolve_else(self, handler: Callable[[Any], Any]) -> Any:
        """Finish the chain and return the winning output.

        handler runs only if no earlier rule fired. A deferred output comes
        back as an awaitable resolving to the inner value; an immediate output
        is returned unchanged.
        """
        outcome = self.outcome
        if outcome is None:
            logger.debug("no rule fired for %r, using fallback", self.subject)
            outcome = capture(handler, self.subject)
        return outcome.settle()


def match(subject: Any) -> Matcher:
    """Start a resolution chain for subject."""
    return Matcher(subject)
