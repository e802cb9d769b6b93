"""Question — side-effect-free probe of current UI state.

answered_by() does the work and may raise; evaluate() is what Actors call and
degrades driver-boundary failures (ElementError, WaitTimeoutError) to the
Question's default. Task failures never pass through this path.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Generic, TypeVar

from screenplay.core.exceptions import ElementError, WaitTimeoutError

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Question(ABC, Generic[T]):
    """A typed read of UI state with a well-defined default."""

    default: T

    @abstractmethod
    def describe(self) -> str:
        ...

    @abstractmethod
    async def answered_by(self, actor: Actor) -> T:
        """Compute the answer. May raise driver-boundary errors."""
        ...

    async def evaluate(self, actor: Actor) -> T:
        try:
            return await self.answered_by(actor)
        except (ElementError, WaitTimeoutError) as e:
            logger.debug("%s: using default %r (%s)", self.describe(), self.default, e)
            return self.default

    @staticmethod
    def about(
        description: str,
        answer: Callable[[Actor], Awaitable[T]],
        default: T,
    ) -> Question[T]:
        """Build a Question from a coroutine function."""
        return _AdHocQuestion(description, answer, default)

    def __str__(self) -> str:
        return self.describe()


class _AdHocQuestion(Question[T]):
    def __init__(
        self,
        description: str,
        answer: Callable[[Actor], Awaitable[T]],
        default: T,
    ) -> None:
        self._description = description
        self._answer = answer
        self.default = default

    def describe(self) -> str:
        return self._description

    async def answered_by(self, actor: Actor) -> T:
        return await self._answer(actor)
