"""Platform detection and per-platform selector configuration."""

from docusaurus_scraper.platforms.detector import detect_platform, detect_platform_from_html
from docusaurus_scraper.platforms.registry import (
    get_platform_config,
    list_platforms,
    resolve_platform,
)

__all__ = [
    "detect_platform",
    "detect_platform_from_html",
    "get_platform_config",
    "list_platforms",
    "resolve_platform",
]
