"""Element-state Questions. All accept a Target or a FallbackChain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from screenplay.actors.abilities import BrowseTheWeb
from screenplay.core.exceptions import ElementNotFound
from screenplay.core.locator import FallbackChain
from screenplay.core.models import ElementState
from screenplay.questions.base import Question

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor
    from screenplay.core.locator import Target


@dataclass(frozen=True)
class Visibility(Question[bool]):
    target: Target | FallbackChain
    default: ClassVar[bool] = False

    @classmethod
    def of(cls, target: Target | FallbackChain) -> Visibility:
        return cls(target)

    def describe(self) -> str:
        return f"whether {self.target.describe()} is visible"

    async def answered_by(self, actor: Actor) -> bool:
        return await BrowseTheWeb.as_(actor).in_state(self.target, ElementState.VISIBLE)


@dataclass(frozen=True)
class Presence(Question[bool]):
    target: Target | FallbackChain
    default: ClassVar[bool] = False

    @classmethod
    def of(cls, target: Target | FallbackChain) -> Presence:
        return cls(target)

    def describe(self) -> str:
        return f"whether {self.target.describe()} is present"

    async def answered_by(self, actor: Actor) -> bool:
        return bool(await BrowseTheWeb.as_(actor).resolve_first(self.target))


@dataclass(frozen=True)
class Enabled(Question[bool]):
    target: Target | FallbackChain
    default: ClassVar[bool] = False

    @classmethod
    def of(cls, target: Target | FallbackChain) -> Enabled:
        return cls(target)

    def describe(self) -> str:
        return f"whether {self.target.describe()} is enabled"

    async def answered_by(self, actor: Actor) -> bool:
        """True when any link of a chain resolves to an enabled element."""
        browser = BrowseTheWeb.as_(actor)
        for target in FallbackChain.of(self.target).targets:
            elements = await browser.resolve(target)
            if elements and await elements[0].is_enabled():
                return True
        return False


@dataclass(frozen=True)
class Text(Question[str]):
    """Rendered text of the first matching element."""

    target: Target | FallbackChain
    default: ClassVar[str] = ""

    @classmethod
    def of(cls, target: Target | FallbackChain) -> Text:
        return cls(target)

    def describe(self) -> str:
        return f"the text of {self.target.describe()}"

    async def answered_by(self, actor: Actor) -> str:
        elements = await BrowseTheWeb.as_(actor).resolve_first(self.target)
        if not elements:
            raise ElementNotFound("No element to read text from", target=self.target.describe())
        return await elements[0].text()


@dataclass(frozen=True)
class Count(Question[int]):
    target: Target | FallbackChain
    default: ClassVar[int] = 0

    @classmethod
    def of(cls, target: Target | FallbackChain) -> Count:
        return cls(target)

    def describe(self) -> str:
        return f"the number of {self.target.describe()}"

    async def answered_by(self, actor: Actor) -> int:
        return len(await BrowseTheWeb.as_(actor).resolve_first(self.target))
