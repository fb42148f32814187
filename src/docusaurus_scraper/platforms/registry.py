"""Static selector configuration per documentation platform."""

from docusaurus_scraper.core.models import Platform, PlatformConfig

DOCUSAURUS_CONFIG = PlatformConfig(
    navigation_selectors=(
        'nav a[href*="/docs"]',
        ".menu a",
        ".sidebar a",
        '[class*="sidebar"] a',
        '[class*="menu"] a',
    ),
    content_selectors=(
        "main article",
        ".markdown",
        '[class*="docItemContainer"]',
        '[class*="docMainContainer"]',
        '[class*="content"]',
        "main",
        "article",
    ),
    use_sitemap=True,
)

MINTLIFY_CONFIG = PlatformConfig(
    navigation_selectors=(
        ".docs-sidebar a",
        ".sidebar a",
        "nav a",
        "[data-nav] a",
        ".navigation a",
        '[class*="sidebar"] a',
        '[class*="nav"] a',
        ".docs-nav a",
    ),
    content_selectors=(
        ".docs-content",
        ".markdown",
        "main article",
        '[class*="content"]',
        ".prose",
        "main",
        "article",
        ".page-content",
    ),
    use_sitemap=True,
    url_include_patterns=(r"/docs/", r"/guide/", r"/api/", r"/reference/"),
    url_exclude_patterns=(
        r"/api/auth/",
        r"/oauth/",
        r"/login",
        r"/signup",
        r"/dashboard",
        r"/settings",
        r"(?i)\.(css|js|json|xml|ico|png|jpg|jpeg|gif|svg)$",
        r"/assets/",
        r"/static/",
    ),
)

_CONCRETE: dict[Platform, PlatformConfig] = {
    Platform.DOCUSAURUS: DOCUSAURUS_CONFIG,
    Platform.MINTLIFY: MINTLIFY_CONFIG,
}


def _union(*groups: tuple[str, ...]) -> tuple[str, ...]:
    """Concatenate selector lists, keeping the first occurrence of each."""
    return tuple(dict.fromkeys(s for group in groups for s in group))


AUTO_CONFIG = PlatformConfig(
    navigation_selectors=_union(*(c.navigation_selectors for c in _CONCRETE.values())),
    content_selectors=_union(*(c.content_selectors for c in _CONCRETE.values())),
    use_sitemap=True,
)

_REGISTRY: dict[Platform, PlatformConfig] = {**_CONCRETE, Platform.AUTO: AUTO_CONFIG}


def get_platform_config(platform: Platform) -> PlatformConfig:
    """Return the selector configuration for a platform."""
    return _REGISTRY[platform]


def list_platforms() -> list[Platform]:
    """List all known platforms, the catch-all last."""
    return list(_REGISTRY)


def resolve_platform(value: str | Platform) -> Platform:
    """Parse a platform name.

    Raises:
        ValueError: If the name is not a known platform.
    """
    if isinstance(value, Platform):
        return value
    try:
        return Platform(value.strip().lower())
    except ValueError:
        known = ", ".join(p.value for p in Platform)
        raise ValueError(f"Unknown platform '{value}' (expected one of: {known})") from None
