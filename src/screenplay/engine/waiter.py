"""Waiter — polling wait engine.

Evaluates a predicate immediately, then every poll_interval until it holds
(Satisfied) or the elapsed time reaches the timeout (TimedOut, raising
WaitTimeoutError). Timeout and poll interval are per call, so slow
network-bound steps can wait longer than simple visibility checks.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from screenplay.core.exceptions import ElementError, WaitTimeoutError
from screenplay.core.models import ElementState

if TYPE_CHECKING:
    from screenplay.engine.base import BaseElement

logger = logging.getLogger(__name__)

Predicate = Callable[[], Awaitable[bool]]


@dataclass(frozen=True)
class WaitCondition:
    """One wait request. Created per call, discarded after resolution."""

    description: str
    predicate: Predicate
    timeout: float
    poll_interval: float

    def __post_init__(self) -> None:
        if self.timeout < 0:
            msg = f"timeout must be >= 0, got {self.timeout}"
            raise ValueError(msg)
        if self.poll_interval <= 0:
            msg = f"poll_interval must be > 0, got {self.poll_interval}"
            raise ValueError(msg)


class Waiter:
    """Polls conditions against the driver boundary."""

    def __init__(
        self,
        poll_interval_ms: int = 250,
        timeout_ms: int = 10000,
    ) -> None:
        self._poll_interval = poll_interval_ms / 1000
        self._timeout = timeout_ms / 1000

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    async def wait_until(
        self,
        predicate: Predicate,
        description: str,
        *,
        timeout: float | None = None,
        poll_interval: float | None = None,
    ) -> float:
        """Wait until predicate() is true.

        Args:
            predicate: Async callable re-evaluated on every poll.
            description: Human-readable condition, used in the timeout error.
            timeout: Seconds to wait; defaults to the waiter's timeout.
            poll_interval: Seconds between polls; defaults to the waiter's interval.

        Returns:
            Seconds elapsed until the condition was satisfied.

        Raises:
            WaitTimeoutError: If the condition did not hold within the timeout.
        """
        condition = WaitCondition(
            description=description,
            predicate=predicate,
            timeout=self._timeout if timeout is None else timeout,
            poll_interval=self._poll_interval if poll_interval is None else poll_interval,
        )
        return await self.wait_for(condition)

    async def wait_for(self, condition: WaitCondition) -> float:
        """Run a WaitCondition to completion. See wait_until()."""
        start = time.monotonic()
        last_error: ElementError | None = None
        polls = 0

        while True:
            polls += 1
            try:
                if await condition.predicate():
                    elapsed = time.monotonic() - start
                    logger.debug(
                        "Satisfied: %s (%.2fs, %d poll(s))", condition.description, elapsed, polls
                    )
                    return elapsed
            except ElementError as e:
                # Element detached or not yet actionable: treat as "not yet".
                last_error = e

            elapsed = time.monotonic() - start
            if elapsed >= condition.timeout:
                raise WaitTimeoutError(
                    condition.description, elapsed, condition.timeout
                ) from last_error
            await asyncio.sleep(condition.poll_interval)


async def elements_in_state(elements: list[BaseElement], state: ElementState) -> bool:
    """Whether the first of elements is in state. An empty list is only INVISIBLE."""
    if state == ElementState.PRESENT:
        return bool(elements)
    if state == ElementState.INVISIBLE:
        return not elements or not await elements[0].is_visible()
    if not elements or not await elements[0].is_visible():
        return False
    if state == ElementState.CLICKABLE:
        return await elements[0].is_enabled()
    return True


def element_state_predicate(
    resolve: Callable[[], Awaitable[list[BaseElement]]],
    state: ElementState,
) -> Predicate:
    """Build a predicate checking the first resolved element against state.

    resolve is called on every poll; element lookups are never cached.
    """

    async def predicate() -> bool:
        return await elements_in_state(await resolve(), state)

    return predicate
