"""Primitive Interactions: navigate, click, enter text, select, wait, settle."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from screenplay.actors.abilities import BrowseTheWeb
from screenplay.core.models import ElementState, WaitProfile
from screenplay.tasks.base import Interaction

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor
    from screenplay.core.locator import FallbackChain, Target

logger = logging.getLogger(__name__)

_MASK = "*****"


@dataclass(frozen=True)
class Open(Interaction):
    destination: str
    relative: bool = False

    @classmethod
    def url(cls, url: str) -> Open:
        return cls(url)

    @classmethod
    def path(cls, path: str) -> Open:
        """Open a path relative to the configured base URL."""
        return cls(path, relative=True)

    def describe(self) -> str:
        return f"open {self.destination}"

    async def perform_as(self, actor: Actor) -> None:
        browser = BrowseTheWeb.as_(actor)
        url = browser.url_for(self.destination) if self.relative else self.destination
        await browser.open(url)


@dataclass(frozen=True)
class Click(Interaction):
    target: Target | FallbackChain

    @classmethod
    def on(cls, target: Target | FallbackChain) -> Click:
        return cls(target)

    def describe(self) -> str:
        return f"click on {self.target.describe()}"

    async def perform_as(self, actor: Actor) -> None:
        element = await BrowseTheWeb.as_(actor).find(self.target)
        await element.click()


@dataclass(frozen=True)
class Enter(Interaction):
    """Clear a field, then type a value into it."""

    value: str = field(repr=False)
    target: Target | FallbackChain
    secret: bool = False

    @staticmethod
    def the_value(value: str | int | float) -> EnterValue:
        return EnterValue(str(value))

    @staticmethod
    def the_secret(value: str) -> EnterValue:
        """Like the_value, but the value never appears in descriptions or logs."""
        return EnterValue(value, secret=True)

    def describe(self) -> str:
        shown = _MASK if self.secret else repr(self.value)
        return f"enter {shown} into {self.target.describe()}"

    async def perform_as(self, actor: Actor) -> None:
        element = await BrowseTheWeb.as_(actor).find(self.target)
        await element.clear()
        await element.type(self.value)


@dataclass(frozen=True)
class EnterValue:
    value: str = field(repr=False)
    secret: bool = False

    def into(self, target: Target | FallbackChain) -> Enter:
        return Enter(self.value, target, secret=self.secret)


@dataclass(frozen=True)
class Clear(Interaction):
    target: Target | FallbackChain

    @classmethod
    def field(cls, target: Target | FallbackChain) -> Clear:
        return cls(target)

    def describe(self) -> str:
        return f"clear {self.target.describe()}"

    async def perform_as(self, actor: Actor) -> None:
        element = await BrowseTheWeb.as_(actor).find(self.target)
        await element.clear()


@dataclass(frozen=True)
class SelectFromOptions(Interaction):
    option: str
    target: Target | FallbackChain
    use_value: bool = False

    @staticmethod
    def by_visible_text(text: str) -> SelectOption:
        return SelectOption(text)

    @staticmethod
    def by_value(value: str) -> SelectOption:
        return SelectOption(value, use_value=True)

    def describe(self) -> str:
        kind = "value" if self.use_value else "option"
        return f"select {kind} {self.option!r} from {self.target.describe()}"

    async def perform_as(self, actor: Actor) -> None:
        element = await BrowseTheWeb.as_(actor).find(self.target)
        if self.use_value:
            await element.select_by_value(self.option)
        else:
            await element.select_by_visible_text(self.option)


@dataclass(frozen=True)
class SelectOption:
    option: str
    use_value: bool = False

    def from_(self, target: Target | FallbackChain) -> SelectFromOptions:
        return SelectFromOptions(self.option, target, use_value=self.use_value)


@dataclass(frozen=True)
class WaitUntil(Interaction):
    """Block until a Target reaches an ElementState.

    timeout is either seconds or a WaitProfile resolved against the actor's
    TimeoutConfig when performed.
    """

    target: Target | FallbackChain
    state: ElementState
    timeout: float | WaitProfile = WaitProfile.ELEMENT

    @classmethod
    def the(
        cls,
        target: Target | FallbackChain,
        state: ElementState,
        timeout: float | WaitProfile = WaitProfile.ELEMENT,
    ) -> WaitUntil:
        return cls(target, state, timeout)

    @classmethod
    def visible(
        cls, target: Target | FallbackChain, timeout: float | WaitProfile = WaitProfile.ELEMENT
    ) -> WaitUntil:
        return cls(target, ElementState.VISIBLE, timeout)

    @classmethod
    def clickable(
        cls, target: Target | FallbackChain, timeout: float | WaitProfile = WaitProfile.CONTROL
    ) -> WaitUntil:
        return cls(target, ElementState.CLICKABLE, timeout)

    @classmethod
    def present(
        cls, target: Target | FallbackChain, timeout: float | WaitProfile = WaitProfile.ELEMENT
    ) -> WaitUntil:
        return cls(target, ElementState.PRESENT, timeout)

    @classmethod
    def invisible(
        cls, target: Target | FallbackChain, timeout: float | WaitProfile = WaitProfile.ELEMENT
    ) -> WaitUntil:
        return cls(target, ElementState.INVISIBLE, timeout)

    def describe(self) -> str:
        return f"wait until {self.target.describe()} is {self.state.value}"

    async def perform_as(self, actor: Actor) -> None:
        await BrowseTheWeb.as_(actor).wait_until(self.target, self.state, self.timeout)


@dataclass(frozen=True)
class Pause(Interaction):
    """Bounded grace period after an action with no observable completion."""

    reason: str

    @classmethod
    def for_settling(cls, reason: str) -> Pause:
        return cls(reason)

    def describe(self) -> str:
        return f"let {self.reason} settle"

    async def perform_as(self, actor: Actor) -> None:
        seconds = BrowseTheWeb.as_(actor).timeouts.settle_grace_s
        logger.debug("Settling %.2fs: %s", seconds, self.reason)
        await asyncio.sleep(seconds)
