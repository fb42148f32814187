"""Discovery strategy using sitemap.xml files."""

import html
import logging
import re
from collections.abc import Iterable
from typing import Optional

import httpx

from docusaurus_scraper.core.exceptions import SitemapUnavailable
from docusaurus_scraper.core.interfaces import DiscoveryStrategy
from docusaurus_scraper.core.models import PlatformConfig, ScrapeConfig
from docusaurus_scraper.discovery.urls import is_in_scope, is_same_origin, passes_filters

logger = logging.getLogger(__name__)

LOC_PATTERN = re.compile(r"<loc>(.*?)</loc>", re.DOTALL)
SITEMAP_INDEX_PATTERN = re.compile(r"<sitemapindex[\s>]")


def extract_locs(xml: str) -> list[str]:
    """Return every address enclosed in ``<loc>`` tags, in document order."""
    return [html.unescape(m.strip()) for m in LOC_PATTERN.findall(xml) if m.strip()]


def is_sitemap_index(xml: str) -> bool:
    return SITEMAP_INDEX_PATTERN.search(xml) is not None


def parse_sitemap(
    xml: str,
    base_url: str,
    include_patterns: Iterable[str] = (),
    exclude_patterns: Iterable[str] = (),
) -> list[str]:
    """Select the documentation addresses listed in a sitemap.

    Args:
        xml: Sitemap content.
        base_url: Only addresses under this prefix (and origin) are kept.
        include_patterns: If given, an address must match at least one.
        exclude_patterns: Any match discards the address.

    Returns:
        Unique addresses, sorted lexicographically.
    """
    include_patterns = list(include_patterns)
    exclude_patterns = list(exclude_patterns)

    urls = {
        url
        for url in extract_locs(xml)
        if is_in_scope(url, base_url)
        and passes_filters(url, include_patterns, exclude_patterns)
    }
    return sorted(urls)


class SitemapDiscovery(DiscoveryStrategy):
    """Discover URLs from a site's sitemap.xml."""

    def __init__(
        self,
        platform_config: PlatformConfig,
        config: ScrapeConfig,
        sitemap_path: str = "/sitemap.xml",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the discovery strategy.

        Args:
            platform_config: Selector and pattern configuration.
            config: Scrape configuration.
            sitemap_path: Path of the sitemap relative to the base URL.
            transport: Optional httpx transport (used by tests).
        """
        self._platform_config = platform_config
        self._config = config
        self._sitemap_path = sitemap_path
        self._transport = transport

    @property
    def name(self) -> str:
        return "sitemap"

    @property
    def include_patterns(self) -> list[str]:
        return [*self._platform_config.url_include_patterns, *self._config.include_patterns]

    @property
    def exclude_patterns(self) -> list[str]:
        return [*self._platform_config.url_exclude_patterns, *self._config.exclude_patterns]

    async def discover(self, base_url: str) -> list[str]:
        """Discover URLs from the sitemap.

        Raises:
            SitemapUnavailable: If the sitemap cannot be fetched.
        """
        base_url = base_url.rstrip("/")
        sitemap_url = f"{base_url}/{self._sitemap_path.lstrip('/')}"

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self._config.timeout,
            follow_redirects=True,
        ) as client:
            urls = await self._collect(client, sitemap_url, base_url, seen=set())

        logger.info("Found %d URLs in sitemap", len(urls))
        return sorted(urls)

    async def _collect(
        self,
        client: httpx.AsyncClient,
        sitemap_url: str,
        base_url: str,
        seen: set[str],
    ) -> set[str]:
        seen.add(sitemap_url)
        content = await self._fetch(client, sitemap_url)

        if not is_sitemap_index(content):
            return set(
                parse_sitemap(content, base_url, self.include_patterns, self.exclude_patterns)
            )

        urls: set[str] = set()
        for child in extract_locs(content):
            if child in seen or not is_same_origin(child, base_url):
                continue
            try:
                urls |= await self._collect(client, child, base_url, seen)
            except SitemapUnavailable as e:
                logger.warning("Skipping nested sitemap: %s", e)
        return urls

    async def _fetch(self, client: httpx.AsyncClient, url: str) -> str:
        logger.debug("Fetching sitemap %s", url)
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SitemapUnavailable(f"Failed to fetch {url}: {e}") from e
        return response.text
