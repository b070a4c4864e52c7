"""Python-Markdown extensions used when rendering content pages.

``SlugLinkExtension``
    Rewrite internal ``a[href]`` and ``img[src]`` targets through
    :func:`~linkwise.paths.transform_link` so they resolve for the page's slug
    under the configured link strategy.
``HighlightTokenExtension``
    Render text wrapped in a token (``==text==`` by default) as ``<strong>``.
``HeadingClassExtension``
    Append a CSS class to every ``h1``-``h6`` element.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
import xml.etree.ElementTree as etree  # noqa: N813

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor
from markdown.treeprocessors import Treeprocessor

from linkwise.paths import TransformOptions, is_absolute_url, transform_link

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from linkwise.paths import FullSlug

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
LINK_ATTRIBUTES = {"a": "href", "img": "src"}


@dc.dataclass(frozen=True, slots=True)
class LinkRecord:
    """An internal link found while rendering a page."""

    src: str
    target: str
    href: str


def is_internal_link(target: str | None) -> bool:
    """Return whether ``target`` should be resolved against the site's slugs."""
    if not target:
        return False
    if target.startswith(("#", "//")):
        return False
    return not is_absolute_url(target)


class SlugLinkExtension(Extension):
    """Rewrite content links for the page being rendered.

    Insert this extension into a ``markdown.Markdown`` instance to convert
    author-written links (``../notes/Some Page.md#Heading``, ``folder/``,
    bare file names) into canonical slug links relative to ``slug``. Every
    rewritten link is appended to ``links`` for later checking.
    """

    def __init__(self, slug: FullSlug, options: TransformOptions) -> None:
        super().__init__()
        self.slug = slug
        self.options = options
        self.links: list[LinkRecord] = []

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the link treeprocessor on the Markdown instance."""
        processor = SlugLinkTreeprocessor(md, self)
        md.treeprocessors.register(processor, "linkwise_slug_links", 15)


class SlugLinkTreeprocessor(Treeprocessor):
    """Rewrite internal link targets in the parsed markdown tree."""

    def __init__(self, md: Markdown, extension: SlugLinkExtension) -> None:
        super().__init__(md)
        self.extension = extension

    def run(self, root: Element) -> Element:
        """Rewrite every internal ``href``/``src`` below ``root`` in place."""
        for element in root.iter():
            attribute = LINK_ATTRIBUTES.get(element.tag)
            if attribute is None:
                continue
            target = element.get(attribute)
            if not is_internal_link(target):
                continue
            href = transform_link(self.extension.slug, target, self.extension.options)
            element.set(attribute, href)
            self.extension.links.append(
                LinkRecord(src=self.extension.slug, target=target, href=href)
            )
        return root


class HighlightInlineProcessor(InlineProcessor):
    """Turn ``<token>text<token>`` spans into ``<strong>`` elements."""

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[Element, int, int]:
        """Return a ``strong`` element wrapping the highlighted text."""
        element = etree.Element("strong")
        element.text = m.group(1)
        return element, m.start(0), m.end(0)


class HighlightTokenExtension(Extension):
    """Register the highlight-token inline pattern."""

    def __init__(self, token: str = "==") -> None:
        super().__init__()
        self.token = token

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the highlight pattern ahead of emphasis handling."""
        escaped = re.escape(self.token)
        pattern = f"{escaped}([^\\n]+?){escaped}"
        md.inlinePatterns.register(
            HighlightInlineProcessor(pattern, md), "linkwise_highlight", 65
        )


class HeadingClassTreeprocessor(Treeprocessor):
    """Append a class name to every heading element."""

    def __init__(self, md: Markdown, class_name: str) -> None:
        super().__init__(md)
        self.class_name = class_name

    def run(self, root: Element) -> Element:
        """Add the class to headings, keeping any classes already present."""
        for element in root.iter():
            if element.tag not in HEADING_TAGS:
                continue
            classes = (element.get("class") or "").split()
            if self.class_name not in classes:
                classes.append(self.class_name)
            element.set("class", " ".join(classes))
        return root


class HeadingClassExtension(Extension):
    """Register the heading-class treeprocessor."""

    def __init__(self, class_name: str) -> None:
        super().__init__()
        self.class_name = class_name

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading treeprocessor on the Markdown instance."""
        processor = HeadingClassTreeprocessor(md, self.class_name)
        md.treeprocessors.register(processor, "linkwise_heading_class", 10)


__all__ = [
    "HeadingClassExtension",
    "HighlightTokenExtension",
    "LinkRecord",
    "SlugLinkExtension",
    "is_internal_link",
]
