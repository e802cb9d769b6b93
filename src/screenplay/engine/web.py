"""PlaywrightDriver — Playwright-based driver boundary.

Implements BaseDriver using the Playwright async API. Locators are passed
to Playwright with an explicit engine prefix (``xpath=`` / ``css=``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator as PlaywrightLocator

from screenplay.core.exceptions import (
    ElementNotFound,
    ElementNotInteractable,
    EngineError,
)
from screenplay.core.models import EngineConfig
from screenplay.engine.base import BaseDriver, BaseElement

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from screenplay.core.locator import Locator

logger = logging.getLogger(__name__)

# Upper bound for one is_enabled() check inside a wait poll.
_STATE_CHECK_TIMEOUT_MS = 50


class PlaywrightElement(BaseElement):
    """One element of a resolved Playwright locator (``locator.nth(i)``)."""

    def __init__(self, locator: PlaywrightLocator, description: str, timeout_ms: int) -> None:
        self._locator = locator
        self._description = description
        self._timeout_ms = timeout_ms

    async def _act(self, action: str, operation: Callable[[], Awaitable[object]]) -> object:
        try:
            if await self._locator.count() == 0:
                msg = f"Cannot {action}: element is no longer attached"
                raise ElementNotFound(msg, target=self._description)
            return await operation()
        except PlaywrightError as e:
            msg = f"Cannot {action}: {e.message}"
            raise ElementNotInteractable(msg, target=self._description) from e

    async def click(self) -> None:
        await self._act("click", lambda: self._locator.click(timeout=self._timeout_ms))

    async def type(self, text: str) -> None:
        await self._act(
            "type", lambda: self._locator.press_sequentially(text, timeout=self._timeout_ms)
        )

    async def clear(self) -> None:
        await self._act("clear", lambda: self._locator.clear(timeout=self._timeout_ms))

    async def select_by_visible_text(self, text: str) -> None:
        await self._act(
            "select option",
            lambda: self._locator.select_option(label=text, timeout=self._timeout_ms),
        )

    async def select_by_value(self, value: str) -> None:
        await self._act(
            "select option",
            lambda: self._locator.select_option(value=value, timeout=self._timeout_ms),
        )

    async def text(self) -> str:
        result = await self._act(
            "read text", lambda: self._locator.inner_text(timeout=self._timeout_ms)
        )
        return str(result)

    async def is_visible(self) -> bool:
        try:
            return await self._locator.is_visible()
        except PlaywrightError:
            return False

    async def is_enabled(self) -> bool:
        try:
            if await self._locator.count() == 0:
                return False
            return await self._locator.is_enabled(timeout=_STATE_CHECK_TIMEOUT_MS)
        except PlaywrightError:
            return False


class PlaywrightDriver(BaseDriver):
    """Playwright-based browser session."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    @property
    def page(self) -> Page:
        """Current Playwright page. Raises EngineError if not started."""
        if self._page is None:
            msg = "PlaywrightDriver not started. Call start() first."
            raise EngineError(msg)
        return self._page

    async def start(self) -> None:
        """Launch browser and create page."""
        try:
            pw = await async_playwright().start()
            self._playwright = pw

            browser_type = getattr(pw, self._config.browser, None)
            if browser_type is None:
                msg = f"Unknown browser: {self._config.browser}"
                raise EngineError(msg)

            self._browser = await browser_type.launch(headless=self._config.headless)
            self._context = await self._browser.new_context(
                viewport={
                    "width": self._config.viewport_width,
                    "height": self._config.viewport_height,
                },
                ignore_https_errors=True,
            )
            self._context.set_default_timeout(self._config.timeout_ms)
            self._page = await self._context.new_page()
            logger.info("Started %s (headless=%s)", self._config.browser, self._config.headless)
        except Exception as e:
            await self._discard()
            if isinstance(e, EngineError):
                raise
            msg = f"Failed to start PlaywrightDriver: {e}"
            raise EngineError(msg) from e

    async def _discard(self) -> None:
        """Release whatever a failed start() left running."""
        try:
            await self.stop()
        except EngineError as e:
            logger.warning("Cleanup after failed start: %s", e)

    async def stop(self) -> None:
        """Close browser and cleanup."""
        try:
            if self._context:
                await self._context.close()
            if self._browser:
                await self._browser.close()
            if self._playwright:
                await self._playwright.stop()
        except Exception as e:
            msg = f"Failed to stop PlaywrightDriver: {e}"
            raise EngineError(msg) from e
        finally:
            self._page = None
            self._context = None
            self._browser = None
            self._playwright = None

    async def open(self, url: str) -> None:
        """Navigate to URL."""
        try:
            await self.page.goto(url, wait_until="domcontentloaded")
        except PlaywrightError as e:
            msg = f"Navigation to {url} failed: {e.message}"
            raise EngineError(msg) from e

    async def resolve(self, locator: Locator) -> list[BaseElement]:
        """Return live elements for locator; [] when nothing matches."""
        selector = str(locator)
        try:
            handles = await self.page.locator(selector).all()
        except PlaywrightError as e:
            logger.warning("Locator %s could not be evaluated: %s", selector, e.message)
            return []
        return [
            PlaywrightElement(handle, selector, self._config.timeout_ms) for handle in handles
        ]
