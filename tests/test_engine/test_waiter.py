"""Tests for Waiter — polling wait engine."""

from __future__ import annotations

import time
from unittest.mock import AsyncMock, patch

import pytest
from fakes import FakeDriver, FakeElement

from screenplay.core.exceptions import ElementNotFound, WaitTimeoutError
from screenplay.core.models import ElementState
from screenplay.engine.waiter import WaitCondition, Waiter, element_state_predicate


class CountingPredicate:
    """Becomes true on the n-th call (never when n is None)."""

    def __init__(self, true_on: int | None = None, error: Exception | None = None) -> None:
        self.true_on = true_on
        self.error = error
        self.calls = 0

    async def __call__(self) -> bool:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.true_on is not None and self.calls >= self.true_on


class TestWaiter:
    @pytest.mark.asyncio
    async def test_satisfied_immediately(self) -> None:
        predicate = CountingPredicate(true_on=1)
        waiter = Waiter(poll_interval_ms=50, timeout_ms=1000)
        elapsed = await waiter.wait_until(predicate, "ready")
        assert predicate.calls == 1
        assert elapsed < 0.05

    @pytest.mark.asyncio
    async def test_satisfied_after_polls(self) -> None:
        predicate = CountingPredicate(true_on=3)
        waiter = Waiter(poll_interval_ms=10, timeout_ms=1000)
        elapsed = await waiter.wait_until(predicate, "ready")
        assert predicate.calls == 3
        assert elapsed >= 0.019

    @pytest.mark.asyncio
    async def test_sleeps_full_poll_interval(self) -> None:
        predicate = CountingPredicate(true_on=3)
        waiter = Waiter(poll_interval_ms=250, timeout_ms=10000)
        with patch("screenplay.engine.waiter.asyncio.sleep", new=AsyncMock()) as sleep:
            await waiter.wait_until(predicate, "ready")
        assert sleep.await_count == 2
        sleep.assert_awaited_with(0.25)

    @pytest.mark.asyncio
    async def test_times_out(self) -> None:
        predicate = CountingPredicate()
        waiter = Waiter(poll_interval_ms=10)
        start = time.monotonic()
        with pytest.raises(WaitTimeoutError) as exc_info:
            await waiter.wait_until(predicate, "toast to be visible", timeout=0.1)
        took = time.monotonic() - start
        err = exc_info.value
        assert err.condition == "toast to be visible"
        assert err.timeout == 0.1
        assert err.elapsed >= 0.1
        assert 0.1 <= took < 0.1 + 0.2
        assert predicate.calls >= 2

    @pytest.mark.asyncio
    async def test_zero_timeout_evaluates_once(self) -> None:
        predicate = CountingPredicate()
        with pytest.raises(WaitTimeoutError):
            await Waiter().wait_until(predicate, "never", timeout=0)
        assert predicate.calls == 1

    @pytest.mark.asyncio
    async def test_element_error_counts_as_not_yet(self) -> None:
        error = ElementNotFound("detached", target="modal title")
        predicate = CountingPredicate(error=error)
        waiter = Waiter(poll_interval_ms=10)
        with pytest.raises(WaitTimeoutError) as exc_info:
            await waiter.wait_until(predicate, "modal", timeout=0.05)
        assert exc_info.value.__cause__ is error
        assert predicate.calls >= 2

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self) -> None:
        predicate = CountingPredicate(error=RuntimeError("boom"))
        with pytest.raises(RuntimeError, match="boom"):
            await Waiter(poll_interval_ms=10).wait_until(predicate, "x", timeout=1)
        assert predicate.calls == 1

    @pytest.mark.asyncio
    async def test_per_call_overrides(self) -> None:
        predicate = CountingPredicate()
        waiter = Waiter(poll_interval_ms=10, timeout_ms=60000)
        with pytest.raises(WaitTimeoutError) as exc_info:
            await waiter.wait_until(predicate, "x", timeout=0.03, poll_interval=0.01)
        assert exc_info.value.timeout == 0.03

    def test_default_params(self) -> None:
        waiter = Waiter()
        assert waiter.poll_interval == 0.25
        assert waiter._timeout == 10.0


class TestWaitCondition:
    def test_rejects_negative_timeout(self) -> None:
        with pytest.raises(ValueError, match="timeout"):
            WaitCondition("x", CountingPredicate(), timeout=-1, poll_interval=0.1)

    def test_rejects_zero_poll_interval(self) -> None:
        with pytest.raises(ValueError, match="poll_interval"):
            WaitCondition("x", CountingPredicate(), timeout=1, poll_interval=0)

    @pytest.mark.asyncio
    async def test_wait_for(self) -> None:
        condition = WaitCondition("ready", CountingPredicate(true_on=2), 1.0, 0.01)
        assert await Waiter().wait_for(condition) > 0


class TestElementStatePredicate:
    @staticmethod
    def _resolver(elements: list[FakeElement]):  # noqa: ANN205
        async def resolve() -> list[FakeElement]:
            return elements

        return resolve

    @pytest.mark.asyncio
    async def test_present(self) -> None:
        element = FakeElement(FakeDriver(), "x", visible=False)
        assert await element_state_predicate(self._resolver([element]), ElementState.PRESENT)()
        assert not await element_state_predicate(self._resolver([]), ElementState.PRESENT)()

    @pytest.mark.asyncio
    async def test_visible(self) -> None:
        hidden = FakeElement(FakeDriver(), "x", visible=False)
        shown = FakeElement(FakeDriver(), "y")
        assert not await element_state_predicate(self._resolver([hidden]), ElementState.VISIBLE)()
        assert await element_state_predicate(self._resolver([shown]), ElementState.VISIBLE)()
        assert not await element_state_predicate(self._resolver([]), ElementState.VISIBLE)()

    @pytest.mark.asyncio
    async def test_clickable_needs_enabled(self) -> None:
        disabled = FakeElement(FakeDriver(), "x", enabled=False)
        enabled = FakeElement(FakeDriver(), "y")
        predicate = element_state_predicate(self._resolver([disabled]), ElementState.CLICKABLE)
        assert not await predicate()
        assert await element_state_predicate(self._resolver([enabled]), ElementState.CLICKABLE)()

    @pytest.mark.asyncio
    async def test_invisible(self) -> None:
        hidden = FakeElement(FakeDriver(), "x", visible=False)
        shown = FakeElement(FakeDriver(), "y")
        assert await element_state_predicate(self._resolver([]), ElementState.INVISIBLE)()
        assert await element_state_predicate(self._resolver([hidden]), ElementState.INVISIBLE)()
        assert not await element_state_predicate(self._resolver([shown]), ElementState.INVISIBLE)()

    @pytest.mark.asyncio
    async def test_resolves_on_every_poll(self) -> None:
        calls = 0

        async def resolve() -> list[FakeElement]:
            nonlocal calls
            calls += 1
            return []

        predicate = element_state_predicate(resolve, ElementState.PRESENT)
        await predicate()
        await predicate()
        assert calls == 2
