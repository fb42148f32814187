"""Documentation scraper: discovery, extraction and assembly in one browser.

Pages are rendered one at a time in a single tab. A page that cannot be
loaded, or that has no recognizable content, is recorded in the report and
left out of the document; only browser start-up and output writing errors
abort the run.
"""

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import httpx

from docusaurus_scraper.core.exceptions import SitemapUnavailable
from docusaurus_scraper.core.interfaces import PageRenderer
from docusaurus_scraper.core.models import (
    PageOutcome,
    Platform,
    PlatformConfig,
    ScrapeConfig,
    ScrapeReport,
    ScrapeStatus,
)
from docusaurus_scraper.discovery.recursive import RecursiveCrawlDiscovery
from docusaurus_scraper.discovery.sitemap import SitemapDiscovery
from docusaurus_scraper.engine.browser import PlaywrightRenderer
from docusaurus_scraper.extraction.content import extract_section
from docusaurus_scraper.platforms.detector import detect_platform
from docusaurus_scraper.platforms.registry import get_platform_config
from docusaurus_scraper.storage.document import assemble_document, write_document

logger = logging.getLogger(__name__)

RendererFactory = Callable[[ScrapeConfig], PageRenderer]


def default_renderer_factory(config: ScrapeConfig) -> PageRenderer:
    return PlaywrightRenderer(headless=config.headless)


class DocumentationScraper:
    """Scrape a documentation site into a single Markdown document."""

    def __init__(
        self,
        config: Optional[ScrapeConfig] = None,
        renderer_factory: RendererFactory = default_renderer_factory,
        sitemap_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the scraper.

        Args:
            config: Scrape configuration.
            renderer_factory: Builds the page renderer for a run.
            sitemap_transport: Optional httpx transport for sitemap requests.
        """
        self._config = config or ScrapeConfig()
        self._renderer_factory = renderer_factory
        self._sitemap_transport = sitemap_transport

    @property
    def config(self) -> ScrapeConfig:
        return self._config

    async def scrape(
        self, base_url: str, output_path: Optional[Union[str, Path]] = None
    ) -> str:
        """Scrape a site and return the document text.

        Args:
            base_url: Root address of the documentation site.
            output_path: If given, the document is also written there.

        Raises:
            RendererError: If the browser cannot be started.
            OSError: If the document cannot be written.
        """
        report = await self.scrape_with_report(base_url, output_path)
        return report.document

    async def scrape_with_report(
        self, base_url: str, output_path: Optional[Union[str, Path]] = None
    ) -> ScrapeReport:
        """Scrape a site and return the document with per-page outcomes."""
        base_url = base_url.rstrip("/")
        started_at = datetime.now(timezone.utc)

        async with self._renderer_factory(self._config) as renderer:
            platform = self._config.platform
            if platform is Platform.AUTO:
                platform = await self._detect_on(renderer, base_url)
                logger.info("Detected platform: %s", platform.value)

            urls, crawl_failures = await self._discover_urls(
                renderer, base_url, get_platform_config(platform)
            )
            logger.info("Found %d documentation URLs", len(urls))

            if self._config.max_pages > 0:
                urls = urls[: self._config.max_pages]

            if platform is Platform.AUTO and urls:
                platform = await self._detect_on(renderer, urls[0])

            report = ScrapeReport(
                base_url=base_url,
                platform=platform,
                started_at=started_at,
                urls=urls,
                outcomes=list(crawl_failures),
            )

            selectors = get_platform_config(platform).content_selectors
            async for outcome in self._extract_pages(renderer, urls, selectors):
                report.outcomes.append(outcome)

        report.completed_at = datetime.now(timezone.utc)
        report.document = assemble_document(
            report.sections,
            base_url=base_url,
            platform=platform,
            include_metadata=self._config.include_metadata,
            generated_at=report.completed_at,
        )

        if output_path is not None:
            write_document(report.document, Path(output_path))

        return report

    async def _detect_on(self, renderer: PageRenderer, url: str) -> Platform:
        """Render ``url`` and classify it; any failure yields ``Platform.AUTO``."""
        try:
            await renderer.navigate(url, self._config.timeout)
            await renderer.wait_for_network_idle()
        except Exception as e:
            logger.debug("Platform detection skipped: %s", e)
            return Platform.AUTO
        return await detect_platform(renderer)

    async def _discover_urls(
        self,
        renderer: PageRenderer,
        base_url: str,
        platform_config: PlatformConfig,
    ) -> tuple[list[str], list[PageOutcome]]:
        """Discover URLs, preferring the sitemap when recursion is disabled.

        Returns:
            The discovered URLs and the pages that failed during a crawl.
        """
        if platform_config.use_sitemap and not self._config.recursive:
            sitemap = SitemapDiscovery(
                platform_config, self._config, transport=self._sitemap_transport
            )
            try:
                urls = await sitemap.discover(base_url)
            except SitemapUnavailable as e:
                logger.warning("Error fetching sitemap, trying recursive crawling: %s", e)
            else:
                if urls:
                    return urls, []
                logger.info("Sitemap listed no documentation URLs, trying recursive crawling")

        crawler = RecursiveCrawlDiscovery(renderer, platform_config, self._config)
        urls = await crawler.discover(base_url)
        return urls, crawler.failures

    async def _extract_pages(
        self,
        renderer: PageRenderer,
        urls: list[str],
        selectors: tuple[str, ...],
    ) -> AsyncIterator[PageOutcome]:
        """Render and convert each URL in order.

        Yields:
            One PageOutcome per URL.
        """
        total = len(urls)

        for i, url in enumerate(urls, 1):
            logger.info("[%d/%d] Processing %s", i, total, url)
            start_time = time.time()

            try:
                await renderer.navigate(url, self._config.timeout)
                await renderer.wait_for_network_idle()
                section = await extract_section(renderer, selectors)
            except Exception as e:
                logger.warning("Error processing %s: %s", url, e)
                outcome = PageOutcome(url=url, status=ScrapeStatus.FAILED, reason=str(e))
            else:
                if section is None:
                    logger.info("No content found on %s", url)
                    outcome = PageOutcome(
                        url=url,
                        status=ScrapeStatus.SKIPPED,
                        reason="no content selector matched",
                    )
                else:
                    outcome = PageOutcome(url=url, status=ScrapeStatus.SUCCESS, section=section)

            outcome.duration_ms = (time.time() - start_time) * 1000
            yield outcome

            await asyncio.sleep(self._config.request_delay)
