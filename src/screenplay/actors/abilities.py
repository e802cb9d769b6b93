"""Abilities — what an Actor can do.

BrowseTheWeb wraps one driver session. It is the only way Interactions and
Questions reach the driver boundary, and it owns the Waiter configured from
the scenario's TimeoutConfig.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from screenplay.core.exceptions import (
    AbilityError,
    ConfigError,
    ElementError,
    ElementNotFound,
    WaitTimeoutError,
)
from screenplay.core.locator import FallbackChain, Target
from screenplay.core.models import Config, ElementState, TimeoutConfig, WaitProfile
from screenplay.engine.waiter import Waiter, element_state_predicate, elements_in_state

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor
    from screenplay.engine.base import BaseDriver, BaseElement

logger = logging.getLogger(__name__)


class Ability:
    """Base ability. Bound to exactly one Actor for its whole lifetime."""

    def __init__(self) -> None:
        self._owner: Actor | None = None

    @property
    def owner(self) -> Actor | None:
        return self._owner

    def bind(self, actor: Actor) -> None:
        if self._owner is not None and self._owner is not actor:
            msg = f"{type(self).__name__} already belongs to {self._owner.name}"
            raise AbilityError(msg)
        self._owner = actor

    async def start(self) -> None:
        """Called when the owning Actor enters the stage."""

    async def close(self) -> None:
        """Called when the owning Actor exits the stage."""


class BrowseTheWeb(Ability):
    """Drive one browser session through the driver boundary."""

    def __init__(
        self,
        driver: BaseDriver,
        base_url: str = "",
        timeouts: TimeoutConfig | None = None,
    ) -> None:
        super().__init__()
        self._driver = driver
        self._base_url = base_url.rstrip("/")
        self._timeouts = timeouts or TimeoutConfig()
        self._waiter = Waiter(
            poll_interval_ms=self._timeouts.poll_interval_ms,
            timeout_ms=int(self._timeouts.element_s * 1000),
        )

    @classmethod
    def with_driver(
        cls,
        driver: BaseDriver,
        base_url: str = "",
        timeouts: TimeoutConfig | None = None,
    ) -> BrowseTheWeb:
        return cls(driver, base_url=base_url, timeouts=timeouts)

    @classmethod
    def using(cls, config: Config) -> BrowseTheWeb:
        """Build a fresh, unstarted driver from config.engine."""
        from screenplay.engine import DRIVER_REGISTRY

        driver_cls = DRIVER_REGISTRY.get(config.engine.type)
        if driver_cls is None:
            msg = f"Unknown engine type: {config.engine.type}"
            raise ConfigError(msg)
        return cls(driver_cls(config.engine), base_url=config.base_url, timeouts=config.timeouts)

    @staticmethod
    def as_(actor: Actor) -> BrowseTheWeb:
        return actor.ability_to(BrowseTheWeb)

    @property
    def driver(self) -> BaseDriver:
        return self._driver

    @property
    def timeouts(self) -> TimeoutConfig:
        return self._timeouts

    @property
    def waiter(self) -> Waiter:
        return self._waiter

    async def start(self) -> None:
        await self._driver.start()

    async def close(self) -> None:
        await self._driver.stop()

    def url_for(self, path: str) -> str:
        """Absolute URL for path, relative to the configured base URL."""
        if "://" in path:
            return path
        if not self._base_url:
            msg = f"No base URL configured, cannot open relative path {path!r}"
            raise ConfigError(msg)
        return f"{self._base_url}/{path.lstrip('/')}"

    def timeout_for(self, timeout: float | WaitProfile) -> float:
        if isinstance(timeout, WaitProfile):
            return self._timeouts.seconds_for(timeout)
        return float(timeout)

    async def open(self, url: str) -> None:
        await self._driver.open(url)

    async def resolve(self, target: Target) -> list[BaseElement]:
        """Resolve a bound Target against the current page. Never cached."""
        return await self._driver.resolve(target.locator())

    async def resolve_first(self, targets: Target | FallbackChain) -> list[BaseElement]:
        """Elements of the first link in the chain that matches anything, without waiting."""
        for target in FallbackChain.of(targets).targets:
            elements = await self.resolve(target)
            if elements:
                return elements
        return []

    async def in_state(self, targets: Target | FallbackChain, state: ElementState) -> bool:
        """Whether the target is in state right now, without waiting.

        Each link of a chain is checked on its own and the first one in state
        wins. INVISIBLE is the exception: it holds only when no link is visible.
        """
        chain = FallbackChain.of(targets)
        if state == ElementState.INVISIBLE:
            for target in chain.targets:
                if not await elements_in_state(await self.resolve(target), state):
                    return False
            return True

        last_error: ElementError | None = None
        for target in chain.targets:
            try:
                if await elements_in_state(await self.resolve(target), state):
                    return True
            except ElementError as e:
                last_error = e
        if last_error is not None:
            raise last_error
        return False

    async def find(self, targets: Target | FallbackChain) -> BaseElement:
        """Element an Interaction should act on.

        A single Target is resolved once; an empty result raises ElementNotFound.
        A FallbackChain gives each link, in declared order, up to the fallback
        timeout to appear before moving to the next one.
        """
        chain = FallbackChain.of(targets)
        if len(chain.targets) == 1:
            elements = await self.resolve(chain.primary)
            if not elements:
                raise ElementNotFound("No element matches", target=chain.primary.describe())
            return elements[0]

        per_link = self._timeouts.fallback_s
        for target in chain.targets:
            try:
                await self._waiter.wait_until(
                    element_state_predicate(lambda t=target: self.resolve(t), ElementState.PRESENT),
                    f"{target} to be present",
                    timeout=per_link,
                )
            except WaitTimeoutError:
                logger.info("Fallback: '%s' did not resolve within %.1fs", target, per_link)
                continue
            elements = await self.resolve(target)
            if elements:
                return elements[0]

        msg = f"No target in the fallback chain resolved within {per_link:.1f}s each"
        raise ElementNotFound(msg, target=chain.describe())

    async def wait_until(
        self,
        targets: Target | FallbackChain,
        state: ElementState,
        timeout: float | WaitProfile = WaitProfile.ELEMENT,
    ) -> float:
        """Block until the target reaches state. Raises WaitTimeoutError."""
        chain = FallbackChain.of(targets)
        return await self._waiter.wait_until(
            lambda: self.in_state(chain, state),
            f"{chain.describe()} to be {state.value}",
            timeout=self.timeout_for(timeout),
        )
