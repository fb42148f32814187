"""
docusaurus-scraper - Extract documentation from Docusaurus and Mintlify sites to Markdown.

Renders every documentation page of a site in a headless browser and
collects the converted content into a single Markdown file, for use as
context by automated readers.

Usage:
    docusaurus-scraper https://docs.example.com
    docusaurus-scraper https://docs.example.com -o docs.md --platform mintlify
"""

__version__ = "1.2.0"

from docusaurus_scraper.core.interfaces import DiscoveryStrategy, PageRenderer
from docusaurus_scraper.core.models import (
    ExtractedSection,
    PageOutcome,
    Platform,
    PlatformConfig,
    ScrapeConfig,
    ScrapeReport,
    ScrapeStatus,
)
from docusaurus_scraper.engine.scraper import DocumentationScraper

__all__ = [
    "__version__",
    "DocumentationScraper",
    # Models
    "ExtractedSection",
    "PageOutcome",
    "Platform",
    "PlatformConfig",
    "ScrapeConfig",
    "ScrapeReport",
    "ScrapeStatus",
    # Interfaces
    "DiscoveryStrategy",
    "PageRenderer",
]
