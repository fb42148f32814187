"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin

import httpx
import pytest
from bs4 import BeautifulSoup

from docusaurus_scraper.core.exceptions import NavigationError
from docusaurus_scraper.core.interfaces import PageRenderer

BASE_URL = "https://docs.example.com"

LONG_TEXT = (
    "This page explains how the feature works in detail, including configuration, "
    "common pitfalls and a worked example you can copy into your own project."
)


class FakeRenderer(PageRenderer):
    """In-memory renderer serving fixed HTML per URL."""

    def __init__(
        self,
        pages: dict[str, str],
        broken_selectors: Optional[set[str]] = None,
    ) -> None:
        self.pages = pages
        self.broken_selectors = broken_selectors or set()
        self.navigations: list[str] = []
        self.started = False
        self.closed = False
        self._url = "about:blank"
        self._soup = BeautifulSoup("", "html.parser")

    async def start(self) -> None:
        self.started = True

    async def close(self) -> None:
        self.closed = True

    @property
    def url(self) -> str:
        return self._url

    async def navigate(self, url: str, timeout: float) -> None:
        self.navigations.append(url)
        if url not in self.pages:
            raise NavigationError(url, "net::ERR_NAME_NOT_RESOLVED")
        self._url = url
        self._soup = BeautifulSoup(self.pages[url], "html.parser")

    async def wait_for_network_idle(self) -> None:
        return None

    async def title(self) -> str:
        if self._soup.title and self._soup.title.string:
            return self._soup.title.string
        return ""

    async def content(self) -> str:
        return str(self._soup)

    def _select_one(self, selector: str):
        if selector in self.broken_selectors:
            raise ValueError(f"cannot evaluate {selector}")
        return self._soup.select_one(selector)

    async def inner_html(self, selector: str) -> Optional[str]:
        element = self._select_one(selector)
        return element.decode_contents() if element is not None else None

    async def text_content(self, selector: str) -> Optional[str]:
        element = self._select_one(selector)
        return element.get_text() if element is not None else None

    async def hrefs(self, selector: str) -> list[str]:
        if selector in self.broken_selectors:
            raise ValueError(f"cannot evaluate {selector}")
        return [
            urljoin(self._url, el["href"])
            for el in self._soup.select(selector)
            if el.name in ("a", "area") and el.get("href")
        ]


def page(title: str, body: str, head: str = "") -> str:
    return f"<html><head><title>{title}</title>{head}</head><body>{body}</body></html>"


def sitemap_transport(files: dict[str, str]) -> httpx.MockTransport:
    """Serve the given paths (e.g. "/sitemap.xml") and 404 everything else."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path in files:
            return httpx.Response(200, text=files[request.url.path])
        return httpx.Response(404)

    return httpx.MockTransport(handler)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def site_pages() -> dict[str, str]:
    """A small documentation site with a short landing page and three doc pages."""
    return {
        BASE_URL: page(
            "Home",
            '<nav><a href="/docs/intro">Intro</a><a href="/docs/guide">Guide</a></nav>'
            "<main><p>Welcome</p></main>"
            '<a href="https://other.com/x">Elsewhere</a>'
            '<a href="/docs/intro#setup">Setup</a>'
            '<a href="mailto:team@example.com">Mail</a>',
        ),
        f"{BASE_URL}/docs/intro": page(
            "Intro",
            '<div class="sidebar"><a href="/docs/guide">Guide</a></div>'
            f"<main><article><h1>Intro</h1><p>{LONG_TEXT}</p></article></main>",
        ),
        f"{BASE_URL}/docs/guide": page(
            "Guide",
            '<a href="/docs/advanced">Advanced</a><a href="/login">Log in</a>'
            f"<main><article><h1>Guide</h1><p>{LONG_TEXT}</p>"
            '<pre><code class="language-python">print("hi")</code></pre></article></main>',
        ),
        f"{BASE_URL}/docs/advanced": page(
            "Advanced",
            f"<main><article><h1>Advanced</h1><p>{LONG_TEXT}</p></article></main>",
        ),
    }
