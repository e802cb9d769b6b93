"""Consequences — assertions over Question answers.

    await nurse.should(see_that(ThePatient.is_registered("Juan Pérez"), True, within=15))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from screenplay.actors.abilities import BrowseTheWeb
from screenplay.core.exceptions import AssertionFailure, WaitTimeoutError
from screenplay.core.models import TimeoutConfig, WaitProfile
from screenplay.engine.waiter import Waiter

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor
    from screenplay.questions.base import Question


@dataclass(frozen=True)
class Consequence:
    """Expect a Question to answer expected, optionally within a time limit.

    expected is either a value compared with ==, or a predicate over the
    answer. With within set, the Question is re-asked through the Wait Engine
    until it matches; the AssertionFailure then carries the last answer seen.
    """

    question: Question[Any]
    expected: Any
    within: float | WaitProfile | None = None

    def _matches(self, actual: Any) -> bool:
        if callable(self.expected):
            return bool(self.expected(actual))
        return actual == self.expected

    def _expected_description(self) -> Any:
        if callable(self.expected):
            return f"matching {getattr(self.expected, '__name__', self.expected)}"
        return self.expected

    def describe(self) -> str:
        return f"{self.question.describe()} is {self._expected_description()!r}"

    async def evaluate_for(self, actor: Actor) -> None:
        if self.within is None:
            actual = await self.question.evaluate(actor)
            if not self._matches(actual):
                raise AssertionFailure(
                    self.question.describe(), self._expected_description(), actual
                )
            return

        waiter, seconds = self._waiter_for(actor, self.within)
        last = self.question.default

        async def answered() -> bool:
            nonlocal last
            last = await self.question.evaluate(actor)
            return self._matches(last)

        try:
            await waiter.wait_until(answered, self.describe(), timeout=seconds)
        except WaitTimeoutError as e:
            raise AssertionFailure(
                self.question.describe(), self._expected_description(), last
            ) from e

    def _waiter_for(self, actor: Actor, within: float | WaitProfile) -> tuple[Waiter, float]:
        if actor.has_ability_to(BrowseTheWeb):
            browser = BrowseTheWeb.as_(actor)
            return browser.waiter, browser.timeout_for(within)
        timeouts = TimeoutConfig()
        seconds = (
            timeouts.seconds_for(within) if isinstance(within, WaitProfile) else float(within)
        )
        return Waiter(poll_interval_ms=timeouts.poll_interval_ms), seconds


def see_that(
    question: Question[Any],
    expected: Any | Callable[[Any], bool],
    within: float | WaitProfile | None = None,
) -> Consequence:
    return Consequence(question, expected, within)
