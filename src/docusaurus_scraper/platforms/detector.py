"""Detect which documentation platform rendered a page."""

import logging

from bs4 import BeautifulSoup

from docusaurus_scraper.core.interfaces import PageRenderer
from docusaurus_scraper.core.models import Platform

logger = logging.getLogger(__name__)


def _has_class_containing(soup: BeautifulSoup, marker: str) -> bool:
    return soup.select_one(f'[class*="{marker}"]') is not None


def _has_docusaurus_script(soup: BeautifulSoup) -> bool:
    for script in soup.find_all("script"):
        src = script.get("src") or ""
        if "docusaurus" in src or "docusaurus" in (script.string or ""):
            return True
    return False


def _has_mintlify_generator(soup: BeautifulSoup) -> bool:
    for meta in soup.find_all("meta", attrs={"name": "generator"}):
        if "Mintlify" in (meta.get("content") or ""):
            return True
    return False


def detect_platform_from_html(html: str) -> Platform:
    """Classify a rendered page by its platform markers.

    Docusaurus markers are checked before Mintlify ones. Returns
    ``Platform.AUTO`` when nothing is recognized or the page cannot be
    inspected.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")

        if _has_class_containing(soup, "docusaurus") or _has_docusaurus_script(soup):
            return Platform.DOCUSAURUS

        if _has_mintlify_generator(soup) or _has_class_containing(soup, "mintlify"):
            return Platform.MINTLIFY
    except Exception as e:
        logger.debug("Platform detection failed: %s", e)

    return Platform.AUTO


async def detect_platform(renderer: PageRenderer) -> Platform:
    """Classify the page currently loaded in ``renderer``. Never raises."""
    try:
        html = await renderer.content()
    except Exception as e:
        logger.debug("Could not read page for platform detection: %s", e)
        return Platform.AUTO
    return detect_platform_from_html(html)
