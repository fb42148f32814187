"""Assemble extracted sections into a single Markdown document."""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from docusaurus_scraper.core.models import ExtractedSection, Platform

logger = logging.getLogger(__name__)

SEPARATOR = "---"


def format_timestamp(moment: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_header(base_url: str, platform: Platform, generated_at: datetime) -> str:
    lines = [
        f"# Documentation from: {base_url}",
        f"Platform: {platform.value}",
        f"Date: {format_timestamp(generated_at)}",
        "",
        SEPARATOR,
        "",
        "",
    ]
    return "\n".join(lines)


def render_section(section: ExtractedSection) -> str:
    lines = [
        f"## {section.title}",
        "",
        f"**URL:** {section.url}",
        f"**Ruta:** {section.path}",
        "",
        section.body,
        "",
        SEPARATOR,
        "",
        "",
    ]
    return "\n".join(lines)


def assemble_document(
    sections: Iterable[ExtractedSection],
    base_url: str,
    platform: Platform,
    include_metadata: bool = True,
    generated_at: Optional[datetime] = None,
) -> str:
    """Build the output document.

    Sections are emitted in the order given, each followed by a separator.

    Args:
        sections: Converted pages in processing order.
        base_url: Address the scrape started from.
        platform: Platform the pages were extracted with.
        include_metadata: Prepend the header block.
        generated_at: Header timestamp (defaults to now).

    Returns:
        The full document text.
    """
    parts: list[str] = []

    if include_metadata:
        parts.append(render_header(base_url, platform, generated_at or datetime.now(timezone.utc)))

    parts.extend(render_section(section) for section in sections)

    return "".join(parts)


def write_document(content: str, path: Path) -> None:
    """Write the document as UTF-8, creating parent directories.

    Raises:
        OSError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Documentation saved to %s", path)
