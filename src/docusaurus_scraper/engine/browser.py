"""Page renderer backed by a headless Chromium via Playwright."""

import logging
from typing import Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout

from docusaurus_scraper.core.exceptions import NavigationError, RendererError
from docusaurus_scraper.core.interfaces import PageRenderer

logger = logging.getLogger(__name__)

_HREFS_SCRIPT = "elements => elements.map(el => el.href).filter(href => href)"


class PlaywrightRenderer(PageRenderer):
    """Render pages in a single Chromium tab."""

    def __init__(self, headless: bool = True) -> None:
        self._headless = headless
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None
        self._timeout_ms: float = 30_000

    async def start(self) -> None:
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=self._headless)
            self._page = await self._browser.new_page()
        except PlaywrightError as e:
            await self.close()
            raise RendererError(f"Could not start browser: {e}") from e
        logger.debug("Browser started (headless=%s)", self._headless)

    async def close(self) -> None:
        if self._browser:
            try:
                await self._browser.close()
            except PlaywrightError as e:
                logger.debug("Error closing browser: %s", e)
            self._browser = None
            self._page = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RendererError("Browser is not started")
        return self._page

    @property
    def url(self) -> str:
        return self.page.url

    async def navigate(self, url: str, timeout: float) -> None:
        self._timeout_ms = timeout * 1000
        try:
            await self.page.goto(url, timeout=self._timeout_ms)
        except PlaywrightTimeout as e:
            raise NavigationError(url, f"timed out after {timeout:g}s") from e
        except PlaywrightError as e:
            raise NavigationError(url, e.message) from e

    async def wait_for_network_idle(self) -> None:
        try:
            await self.page.wait_for_load_state("networkidle", timeout=self._timeout_ms)
        except PlaywrightTimeout as e:
            raise NavigationError(self.page.url, "network did not become idle") from e
        except PlaywrightError as e:
            raise NavigationError(self.page.url, e.message) from e

    async def title(self) -> str:
        return await self.page.title()

    async def content(self) -> str:
        return await self.page.content()

    async def inner_html(self, selector: str) -> Optional[str]:
        element = await self.page.query_selector(selector)
        if element is None:
            return None
        return await element.inner_html()

    async def text_content(self, selector: str) -> Optional[str]:
        element = await self.page.query_selector(selector)
        if element is None:
            return None
        return await element.text_content()

    async def hrefs(self, selector: str) -> list[str]:
        return await self.page.eval_on_selector_all(selector, _HREFS_SCRIPT)
