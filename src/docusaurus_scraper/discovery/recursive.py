"""Discovery strategy using recursive link crawling in a browser."""

import asyncio
import logging
import time

from docusaurus_scraper.core.interfaces import DiscoveryStrategy, PageRenderer
from docusaurus_scraper.core.models import (
    CrawlState,
    PageOutcome,
    PlatformConfig,
    ScrapeConfig,
    ScrapeStatus,
)
from docusaurus_scraper.discovery.urls import is_in_scope, matches_any, passes_filters
from docusaurus_scraper.extraction.content import has_documentation_content

logger = logging.getLogger(__name__)

# Generic selector appended to the platform's navigation selectors
ALL_LINKS_SELECTOR = "a[href]"


class RecursiveCrawlDiscovery(DiscoveryStrategy):
    """Discover URLs by rendering pages and following same-site links.

    The crawl is breadth-first over a FIFO frontier seeded with the base
    URL. A page is recorded as documentation when one of the platform's
    content selectors holds more than ``config.min_content_length``
    characters of text.
    """

    def __init__(
        self,
        renderer: PageRenderer,
        platform_config: PlatformConfig,
        config: ScrapeConfig,
    ) -> None:
        self._renderer = renderer
        self._platform_config = platform_config
        self._config = config
        self.failures: list[PageOutcome] = []

    @property
    def name(self) -> str:
        return "recursive"

    @property
    def link_selectors(self) -> list[str]:
        return [
            *self._platform_config.navigation_selectors,
            *self._config.custom_selectors,
            ALL_LINKS_SELECTOR,
        ]

    @property
    def exclude_patterns(self) -> list[str]:
        return [*self._platform_config.url_exclude_patterns, *self._config.exclude_patterns]

    async def discover(self, base_url: str) -> list[str]:
        logger.info("Starting recursive crawl from %s", base_url)

        state = CrawlState.seeded(base_url)
        while not state.done:
            await self.step(state, base_url)
        self.failures = state.failures

        logger.info(
            "Crawl completed: %d pages visited, %d documentation pages found",
            len(state.visited),
            len(state.discovered),
        )
        return state.snapshot()

    async def step(self, state: CrawlState, base_url: str) -> None:
        """Visit the next URL in the frontier and queue the links it contains.

        A page that cannot be rendered is recorded in ``state.failures``.
        """
        url = state.pop()
        if url in state.visited:
            return
        state.visited.add(url)

        logger.info(
            "Crawling: %s (%d visited, %d pending)", url, len(state.visited), len(state.frontier)
        )
        start_time = time.time()

        try:
            await self._renderer.navigate(url, self._config.timeout)
            await self._renderer.wait_for_network_idle()
        except Exception as e:
            logger.warning("Error crawling %s: %s", url, e)
            state.failures.append(
                PageOutcome(
                    url=url,
                    status=ScrapeStatus.FAILED,
                    reason=str(e),
                    duration_ms=(time.time() - start_time) * 1000,
                )
            )
        else:
            await self._collect(state, url, base_url)

        await asyncio.sleep(self._config.request_delay)

    async def _collect(self, state: CrawlState, url: str, base_url: str) -> None:
        try:
            if await has_documentation_content(
                self._renderer,
                self._platform_config.content_selectors,
                self._config.min_content_length,
            ) and passes_filters(url, self._config.include_patterns):
                state.discovered.add(url)

            for link in await self.harvest_links():
                if self.should_follow(link, base_url, state):
                    state.enqueue(link)
        except Exception as e:
            logger.warning("Error reading %s: %s", url, e)

    async def harvest_links(self) -> list[str]:
        """Collect link targets from every link selector, in selector order."""
        links: list[str] = []
        for selector in self.link_selectors:
            try:
                links.extend(await self._renderer.hrefs(selector))
            except Exception as e:
                logger.debug("Selector %r failed: %s", selector, e)
        return links

    def should_follow(self, url: str, base_url: str, state: CrawlState) -> bool:
        if not url or not is_in_scope(url, base_url):
            return False
        if url in state.visited or state.is_queued(url):
            return False
        return not matches_any(url, self.exclude_patterns)
