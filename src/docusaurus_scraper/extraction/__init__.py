"""Content location and Markdown conversion."""

from docusaurus_scraper.extraction.content import (
    extract_content,
    extract_section,
    has_documentation_content,
)
from docusaurus_scraper.extraction.markdown import DocsMarkdownConverter, html_to_markdown

__all__ = [
    "DocsMarkdownConverter",
    "extract_content",
    "extract_section",
    "has_documentation_content",
    "html_to_markdown",
]
