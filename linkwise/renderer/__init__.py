"""Markdown rendering with slug-aware link rewriting and heading IDs."""

from .extensions import (
    HeadingClassExtension,
    HighlightTokenExtension,
    LinkRecord,
    SlugLinkExtension,
    is_internal_link,
)
from .html import HtmlContentRenderer, RenderedPage

__all__ = [
    "HeadingClassExtension",
    "HighlightTokenExtension",
    "HtmlContentRenderer",
    "LinkRecord",
    "RenderedPage",
    "SlugLinkExtension",
    "is_internal_link",
]
