"""Locate the primary content of a rendered page."""

import logging
from collections.abc import Sequence
from typing import Optional
from urllib.parse import urlparse

from docusaurus_scraper.core.interfaces import PageRenderer
from docusaurus_scraper.core.models import MIN_CONTENT_LENGTH, ExtractedSection
from docusaurus_scraper.extraction.markdown import html_to_markdown

logger = logging.getLogger(__name__)


async def extract_content(renderer: PageRenderer, selectors: Sequence[str]) -> Optional[str]:
    """Return the inner HTML of the first selector that matches.

    Selectors are tried in order; one that fails to evaluate is skipped, and
    so is an element with no inner HTML. Returns None when nothing matches.
    """
    for selector in selectors:
        try:
            content = await renderer.inner_html(selector)
        except Exception as e:
            logger.debug("Selector %r failed: %s", selector, e)
            continue
        if content is not None and content.strip():
            logger.debug("Content matched %r", selector)
            return content
    return None


async def has_documentation_content(
    renderer: PageRenderer,
    selectors: Sequence[str],
    min_length: int = MIN_CONTENT_LENGTH,
) -> bool:
    """Check whether any content selector holds more than ``min_length`` characters."""
    for selector in selectors:
        try:
            text = await renderer.text_content(selector)
        except Exception as e:
            logger.debug("Selector %r failed: %s", selector, e)
            continue
        if text and len(text.strip()) > min_length:
            return True
    return False


async def extract_section(
    renderer: PageRenderer, selectors: Sequence[str]
) -> Optional[ExtractedSection]:
    """Extract and convert the currently rendered page.

    Returns:
        The converted section, or None if no content selector matched.
    """
    content = await extract_content(renderer, selectors)
    if content is None:
        return None

    url = renderer.url
    return ExtractedSection(
        title=await renderer.title(),
        url=url,
        path=urlparse(url).path or "/",
        body=html_to_markdown(content),
    )
