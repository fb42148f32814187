"""URL scope and pattern filters shared by the discovery strategies."""

import re
from collections.abc import Iterable
from urllib.parse import urlparse


def _origin(url: str) -> tuple[str, str, int | None]:
    parsed = urlparse(url)
    try:
        port = parsed.port
    except ValueError:
        port = None
    return parsed.scheme.lower(), (parsed.hostname or "").lower(), port


def is_same_origin(url: str, base_url: str) -> bool:
    """Check scheme, host and port equality."""
    return _origin(url) == _origin(base_url)


def is_in_scope(url: str, base_url: str) -> bool:
    """Check that a URL lives under the base address and carries no fragment.

    Addresses are compared as exact strings; no trailing-slash or query
    normalization is applied.
    """
    if "#" in url:
        return False
    if not url.startswith(base_url):
        return False
    return is_same_origin(url, base_url)


def matches_any(url: str, patterns: Iterable[str]) -> bool:
    return any(re.search(p, url) for p in patterns)


def passes_filters(
    url: str,
    include_patterns: Iterable[str] = (),
    exclude_patterns: Iterable[str] = (),
) -> bool:
    """Apply an optional allow-list, then a deny-list."""
    include_patterns = list(include_patterns)
    if include_patterns and not matches_any(url, include_patterns):
        return False
    return not matches_any(url, exclude_patterns)
