"""Driver boundary — the browser capability the engine consumes.

PlaywrightDriver implements BaseDriver; tests use an in-memory fake.
resolve() never raises for "no match"; element operations raise
ElementNotFound / ElementNotInteractable when the element cannot be acted on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from screenplay.core.locator import Locator


class BaseElement(ABC):
    """A live element returned by BaseDriver.resolve()."""

    @abstractmethod
    async def click(self) -> None:
        """Click the element."""
        ...

    @abstractmethod
    async def type(self, text: str) -> None:
        """Type text into the element."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Clear an input or textarea."""
        ...

    @abstractmethod
    async def select_by_visible_text(self, text: str) -> None:
        """Select the <option> whose label is text."""
        ...

    @abstractmethod
    async def select_by_value(self, value: str) -> None:
        """Select the <option> whose value attribute is value."""
        ...

    @abstractmethod
    async def text(self) -> str:
        """Return the rendered text of the element."""
        ...

    @abstractmethod
    async def is_visible(self) -> bool:
        """Return True if rendered and visible. Never raises."""
        ...

    @abstractmethod
    async def is_enabled(self) -> bool:
        """Return True if the element accepts input. Never raises."""
        ...


class BaseDriver(ABC):
    """Browser session abstract interface. Owned by exactly one Actor."""

    @abstractmethod
    async def start(self) -> None:
        """Initialize the session (launch browser etc.)."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Shut down the session (close browser etc.)."""
        ...

    @abstractmethod
    async def open(self, url: str) -> None:
        """Navigate to an absolute URL."""
        ...

    @abstractmethod
    async def resolve(self, locator: Locator) -> list[BaseElement]:
        """Return the elements matching locator, in document order. May be empty."""
        ...
