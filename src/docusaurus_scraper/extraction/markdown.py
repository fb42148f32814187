"""HTML to Markdown conversion with overrides for code blocks and callouts."""

from typing import Optional

from bs4 import Tag
from markdownify import ATX, MarkdownConverter

CALLOUT_MARKERS = ("admonition", "callout")
DEFAULT_CALLOUT_TYPE = "note"
LANGUAGE_PREFIX = "language-"


def _classes(el: Tag) -> list[str]:
    classes = el.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return list(classes)


def detect_language(el: Optional[Tag]) -> str:
    """Return the ``language-<name>`` suffix from an element's classes, or ''."""
    if el is None:
        return ""
    for cls in _classes(el):
        if cls.startswith(LANGUAGE_PREFIX) and len(cls) > len(LANGUAGE_PREFIX):
            return cls[len(LANGUAGE_PREFIX) :]
    return ""


def callout_type(el: Tag) -> Optional[str]:
    """Return the callout subtype of an element, or None if it is not a callout.

    ``<div class="admonition admonition-tip">`` is a ``tip`` callout; a marker
    class without a subtype class means ``note``.
    """
    classes = _classes(el)
    for marker in CALLOUT_MARKERS:
        if marker not in classes:
            continue
        prefix = f"{marker}-"
        for cls in classes:
            if cls.startswith(prefix) and len(cls) > len(prefix):
                return cls[len(prefix) :]
        return DEFAULT_CALLOUT_TYPE
    return None


class DocsMarkdownConverter(MarkdownConverter):
    """Markdownify converter tuned for documentation pages.

    - ``pre`` blocks become fenced code using the nested ``code`` element's
      raw text and its ``language-*`` class.
    - Callout containers become ``:::type`` blocks.
    """

    def __init__(self, **options) -> None:
        options.setdefault("heading_style", ATX)
        options.setdefault("bullets", "-")
        super().__init__(**options)

    def process_tag(self, node, *args, **kwargs):
        text = super().process_tag(node, *args, **kwargs)
        kind = callout_type(node) if isinstance(node, Tag) else None
        if kind is None:
            return text
        return f"\n\n:::{kind}\n{text.strip()}\n:::\n\n"

    def convert_pre(self, el, text, parent_tags=None):
        code = el.find("code")
        lang = detect_language(code) or detect_language(el)
        source = code.get_text() if code is not None else el.get_text()
        return f"\n```{lang}\n{source}\n```\n"


def html_to_markdown(html: str, **options) -> str:
    """Convert an HTML fragment to Markdown."""
    return DocsMarkdownConverter(**options).convert(html)
