"""Exceptions raised by docusaurus-scraper."""


class ScraperError(Exception):
    """Base class for scraper errors."""


class RendererError(ScraperError):
    """The browser could not be started or used."""


class NavigationError(ScraperError):
    """A page could not be loaded (timeout, network failure, HTTP error)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class SitemapUnavailable(ScraperError):
    """The sitemap could not be fetched or parsed."""
