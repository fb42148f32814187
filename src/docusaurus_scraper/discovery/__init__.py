"""URL discovery strategies for documentation sites."""

from docusaurus_scraper.discovery.recursive import RecursiveCrawlDiscovery
from docusaurus_scraper.discovery.sitemap import SitemapDiscovery, parse_sitemap

__all__ = [
    "RecursiveCrawlDiscovery",
    "SitemapDiscovery",
    "parse_sitemap",
]
