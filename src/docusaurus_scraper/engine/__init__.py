"""Browser rendering and scrape orchestration."""

from docusaurus_scraper.engine.browser import PlaywrightRenderer
from docusaurus_scraper.engine.scraper import DocumentationScraper

__all__ = ["DocumentationScraper", "PlaywrightRenderer"]
