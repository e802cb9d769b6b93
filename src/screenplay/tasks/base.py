"""Performables — Tasks and Interactions.

A Task is an immutable, ordered sequence of Performables. Performing it is
exactly the concatenation of its children's perform_as calls, so composition
is associative and the first failure stops the sequence. Optional steps are
decided when the Task is built (see included_if), never inside perform_as.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor

logger = logging.getLogger(__name__)


class Performable(ABC):
    """Anything an Actor can attempt."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable name used in logs and failure notes."""
        ...

    @abstractmethod
    async def perform_as(self, actor: Actor) -> None:
        """Perform against the actor's abilities. Failures propagate unchanged."""
        ...

    def __str__(self) -> str:
        return self.describe()


class Interaction(Performable):
    """A primitive action against the driver boundary."""


Steps = Performable | Iterable[Performable]


def flatten(items: Iterable[Steps]) -> tuple[Performable, ...]:
    """Flatten Performables and iterables of them (e.g. included_if results)."""
    result: list[Performable] = []
    for item in items:
        if isinstance(item, Performable):
            result.append(item)
        else:
            result.extend(flatten(item))
    return tuple(result)


def included_if(condition: object, *performables: Steps) -> tuple[Performable, ...]:
    """Performables to include only when condition holds at construction time."""
    return flatten(performables) if condition else ()


@dataclass(frozen=True)
class Task(Performable):
    """Named, ordered composite of Performables."""

    description: str
    performables: tuple[Performable, ...] = ()

    @classmethod
    def where(cls, description: str, *performables: Steps) -> Task:
        return cls(description, flatten(performables))

    def then(self, *performables: Steps) -> Task:
        """A new Task with performables appended. self is unchanged."""
        return Task(self.description, (*self.performables, *flatten(performables)))

    def describe(self) -> str:
        return self.description

    async def perform_as(self, actor: Actor) -> None:
        for performable in self.performables:
            logger.debug("%s: %s", actor.name, performable.describe())
            try:
                await performable.perform_as(actor)
            except Exception as e:
                e.add_note(f"  during: {performable.describe()}")
                raise
