"""Data models for docusaurus-scraper."""

import re
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

# Minimum stripped text length for a content element to count as documentation
MIN_CONTENT_LENGTH = 100


class Platform(Enum):
    """Documentation platform a site is built with."""

    DOCUSAURUS = "docusaurus"
    MINTLIFY = "mintlify"
    AUTO = "auto"


class ScrapeStatus(Enum):
    """Outcome of processing a single page."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class PlatformConfig:
    """Selectors and discovery settings for one platform."""

    navigation_selectors: tuple[str, ...]
    content_selectors: tuple[str, ...]
    use_sitemap: bool = True
    url_include_patterns: tuple[str, ...] = ()
    url_exclude_patterns: tuple[str, ...] = ()


@dataclass
class ScrapeConfig:
    """Configuration for a scrape operation."""

    headless: bool = True
    timeout: float = 10.0  # seconds per navigation
    request_delay: float = 0.5
    include_metadata: bool = True
    platform: Platform = Platform.AUTO
    recursive: bool = True
    custom_selectors: list[str] = field(default_factory=list)
    include_patterns: list[str] = field(default_factory=list)
    exclude_patterns: list[str] = field(default_factory=list)
    min_content_length: int = MIN_CONTENT_LENGTH
    max_pages: int = 0  # 0 = unlimited
    verbose: bool = False
    quiet: bool = False

    def __post_init__(self) -> None:
        for pattern in (*self.include_patterns, *self.exclude_patterns):
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid URL pattern '{pattern}': {e}") from e


@dataclass
class CrawlState:
    """Bookkeeping for one recursive discovery run.

    ``frontier`` is consumed first-in first-out. An address is never in
    ``visited`` and ``frontier`` at the same time. Pages that could not be
    rendered are kept in ``failures``.
    """

    visited: set[str] = field(default_factory=set)
    frontier: deque[str] = field(default_factory=deque)
    discovered: set[str] = field(default_factory=set)
    failures: list["PageOutcome"] = field(default_factory=list)
    _queued: set[str] = field(default_factory=set, repr=False)

    @classmethod
    def seeded(cls, url: str) -> "CrawlState":
        state = cls()
        state.enqueue(url)
        return state

    def enqueue(self, url: str) -> bool:
        """Queue a URL unless it was already visited or queued."""
        if url in self.visited or url in self._queued:
            return False
        self.frontier.append(url)
        self._queued.add(url)
        return True

    def pop(self) -> str:
        url = self.frontier.popleft()
        self._queued.discard(url)
        return url

    def is_queued(self, url: str) -> bool:
        return url in self._queued

    @property
    def done(self) -> bool:
        return not self.frontier

    def snapshot(self) -> list[str]:
        """Return the discovered URLs in lexicographic order."""
        return sorted(self.discovered)


@dataclass(frozen=True)
class ExtractedSection:
    """Converted content of one documentation page."""

    title: str
    url: str
    path: str
    body: str


@dataclass
class PageOutcome:
    """Result of rendering and extracting a single URL."""

    url: str
    status: ScrapeStatus
    reason: Optional[str] = None
    duration_ms: float = 0.0
    section: Optional[ExtractedSection] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "status": self.status.value,
            "reason": self.reason,
            "duration_ms": round(self.duration_ms, 1),
            "title": self.section.title if self.section else None,
        }


@dataclass
class ScrapeReport:
    """Everything produced by one scrape run."""

    base_url: str
    platform: Platform
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None
    urls: list[str] = field(default_factory=list)
    outcomes: list[PageOutcome] = field(default_factory=list)
    document: str = ""

    @property
    def sections(self) -> list[ExtractedSection]:
        return [o.section for o in self.outcomes if o.section is not None]

    def _count(self, status: ScrapeStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def successful(self) -> int:
        return self._count(ScrapeStatus.SUCCESS)

    @property
    def skipped(self) -> int:
        return self._count(ScrapeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(ScrapeStatus.FAILED)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "base_url": self.base_url,
            "platform": self.platform.value,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "stats": {
                "total_urls": len(self.urls),
                "successful": self.successful,
                "skipped": self.skipped,
                "failed": self.failed,
            },
            "pages": [o.to_dict() for o in self.outcomes],
        }
