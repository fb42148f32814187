"""Core models and interfaces for docusaurus-scraper."""

from docusaurus_scraper.core.exceptions import (
    NavigationError,
    RendererError,
    ScraperError,
    SitemapUnavailable,
)
from docusaurus_scraper.core.interfaces import DiscoveryStrategy, PageRenderer
from docusaurus_scraper.core.models import (
    MIN_CONTENT_LENGTH,
    CrawlState,
    ExtractedSection,
    PageOutcome,
    Platform,
    PlatformConfig,
    ScrapeConfig,
    ScrapeReport,
    ScrapeStatus,
)

__all__ = [
    "MIN_CONTENT_LENGTH",
    "CrawlState",
    "ExtractedSection",
    "PageOutcome",
    "Platform",
    "PlatformConfig",
    "ScrapeConfig",
    "ScrapeReport",
    "ScrapeStatus",
    "DiscoveryStrategy",
    "PageRenderer",
    "NavigationError",
    "RendererError",
    "ScraperError",
    "SitemapUnavailable",
]
