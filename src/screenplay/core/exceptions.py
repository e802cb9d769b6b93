"""Screenplay exception hierarchy.

All exceptions inherit from ScreenplayError.
ElementError and WaitTimeoutError carry enough context (target description,
condition, timeout) to diagnose a failed scenario without re-running it.
"""

from __future__ import annotations

from typing import Any


class ScreenplayError(Exception):
    """Base exception for all Screenplay errors."""


class ConfigError(ScreenplayError):
    """Configuration file load/validation error."""


class EngineError(ScreenplayError):
    """Driver lifecycle error (browser launch failure, navigation failure, etc.)."""


class LocatorError(ScreenplayError):
    """A Target cannot be turned into a Locator (wrong arity, bad parameter)."""


class AbilityError(ScreenplayError):
    """Actor lacks an ability, holds it twice, or tries to share another actor's."""


class ElementError(ScreenplayError):
    """Driver boundary failure against a single element."""

    def __init__(self, message: str, target: str = "") -> None:
        self.target = target
        if target:
            message = f"{message} [target: {target}]"
        super().__init__(message)


class ElementNotFound(ElementError):
    """No element matched when an action was attempted."""


class ElementNotInteractable(ElementError):
    """The element exists but cannot be acted upon (hidden, disabled, covered)."""


class WaitTimeoutError(ScreenplayError):
    """A wait condition was not satisfied within its timeout."""

    def __init__(self, condition: str, elapsed: float, timeout: float) -> None:
        self.condition = condition
        self.elapsed = elapsed
        self.timeout = timeout
        super().__init__(
            f"Timed out after {elapsed:.2f}s (timeout {timeout:.2f}s) waiting for {condition}"
        )


class AssertionFailure(ScreenplayError, AssertionError):
    """A Question's answer did not match the expected value."""

    def __init__(self, question: str, expected: Any, actual: Any) -> None:
        self.question = question
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {question} to be {expected!r} but was {actual!r}")
