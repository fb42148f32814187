"""Abstract interfaces for docusaurus-scraper."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional


class PageRenderer(ABC):
    """A single browser tab that renders one page at a time."""

    async def __aenter__(self) -> "PageRenderer":
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def start(self) -> None:
        """Acquire browser resources.

        Raises:
            RendererError: If the browser cannot be started.
        """

    async def close(self) -> None:
        """Release browser resources."""

    @property
    @abstractmethod
    def url(self) -> str:
        """Return the address of the currently rendered page."""
        ...

    @abstractmethod
    async def navigate(self, url: str, timeout: float) -> None:
        """Load a page.

        Args:
            url: Absolute address to load.
            timeout: Navigation timeout in seconds.

        Raises:
            NavigationError: On timeout or network failure.
        """
        ...

    @abstractmethod
    async def wait_for_network_idle(self) -> None:
        """Wait until the page has no pending network activity."""
        ...

    @abstractmethod
    async def title(self) -> str:
        """Return the page title."""
        ...

    @abstractmethod
    async def content(self) -> str:
        """Return the full rendered HTML of the page."""
        ...

    @abstractmethod
    async def inner_html(self, selector: str) -> Optional[str]:
        """Return the inner HTML of the first element matching ``selector``."""
        ...

    @abstractmethod
    async def text_content(self, selector: str) -> Optional[str]:
        """Return the text content of the first element matching ``selector``."""
        ...

    @abstractmethod
    async def hrefs(self, selector: str) -> list[str]:
        """Return the resolved ``href`` of every element matching ``selector``."""
        ...


class DiscoveryStrategy(ABC):
    """Abstract base class for URL discovery strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this discovery strategy."""
        ...

    @abstractmethod
    async def discover(self, base_url: str) -> list[str]:
        """Discover documentation URLs.

        Args:
            base_url: Root address of the documentation site.

        Returns:
            Absolute URLs, sorted lexicographically.
        """
        ...
