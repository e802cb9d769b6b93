"""Actor — the single entry point for performing Tasks and asking Questions.

Actors are created per scenario and discarded at its end; there is no
process-wide cast. Use one as an async context manager so its abilities are
started and closed with the scenario:

    async with Actor.named("Nurse").who_can(BrowseTheWeb.using(config)) as nurse:
        await nurse.attempts_to(Login.as_role("nurse", config))
"""

from __future__ import annotations

import contextlib
import logging
from types import TracebackType
from typing import TYPE_CHECKING, TypeVar

from screenplay.core.exceptions import AbilityError, ScreenplayError

if TYPE_CHECKING:
    from screenplay.actors.abilities import Ability
    from screenplay.questions.base import Question
    from screenplay.questions.consequence import Consequence
    from screenplay.tasks.base import Performable

logger = logging.getLogger(__name__)

A = TypeVar("A", bound="Ability")
T = TypeVar("T")


class Actor:
    """A named subject holding abilities."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._abilities: dict[type[Ability], Ability] = {}

    @classmethod
    def named(cls, name: str) -> Actor:
        return cls(name)

    @property
    def name(self) -> str:
        return self._name

    def can(self, *abilities: Ability) -> Actor:
        """Grant abilities. At most one of each type; never shared between actors."""
        for ability in abilities:
            kind = type(ability)
            if kind in self._abilities:
                msg = f"{self._name} already has the ability {kind.__name__}"
                raise AbilityError(msg)
            ability.bind(self)
            self._abilities[kind] = ability
        return self

    who_can = can

    def ability_to(self, ability_type: type[A]) -> A:
        for ability in self._abilities.values():
            if isinstance(ability, ability_type):
                return ability
        msg = f"{self._name} does not have the ability {ability_type.__name__}"
        raise AbilityError(msg)

    def has_ability_to(self, ability_type: type[Ability]) -> bool:
        return any(isinstance(a, ability_type) for a in self._abilities.values())

    async def attempts_to(self, *performables: Performable) -> None:
        """Perform each Task/Interaction in order. The first failure propagates."""
        for performable in performables:
            description = performable.describe()
            logger.info("%s attempts to %s", self._name, description)
            try:
                await performable.perform_as(self)
            except Exception as e:
                e.add_note(f"{self._name} was attempting to {description}")
                raise

    async def asks_for(self, question: Question[T]) -> T:
        answer = await question.evaluate(self)
        logger.debug("%s asks for %s: %r", self._name, question.describe(), answer)
        return answer

    async def should(self, *consequences: Consequence) -> None:
        """Check each consequence in order. Raises AssertionFailure on the first mismatch."""
        for consequence in consequences:
            await consequence.evaluate_for(self)

    async def exit_stage(self) -> None:
        """Close every ability, then forget them."""
        first_error: ScreenplayError | None = None
        for ability in reversed(list(self._abilities.values())):
            try:
                await ability.close()
            except ScreenplayError as e:
                logger.error("%s could not close %s: %s", self._name, type(ability).__name__, e)
                first_error = first_error or e
        self._abilities.clear()
        if first_error is not None:
            raise first_error

    async def __aenter__(self) -> Actor:
        try:
            for ability in self._abilities.values():
                await ability.start()
        except BaseException:
            # exit_stage logs its own close failures; the start failure wins.
            with contextlib.suppress(ScreenplayError):
                await self.exit_stage()
            raise
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.exit_stage()

    def __repr__(self) -> str:
        return f"Actor({self._name!r})"
