"""Render page markdown into HTML with slug-aware links and heading IDs."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from linkwise.config import RenderOptions
from linkwise.paths import TransformOptions, slug_anchor

from .extensions import (
    HeadingClassExtension,
    HighlightTokenExtension,
    LinkRecord,
    SlugLinkExtension,
)

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

    from linkwise.paths import FullSlug


def _heading_id(value: str, separator: str) -> str:  # noqa: ARG001
    """Adapt :func:`slug_anchor` to the ``toc`` extension's slugify signature."""
    return slug_anchor(value)


@dc.dataclass(slots=True)
class RenderedPage:
    """HTML body of a page and the internal links it contains."""

    html: str
    links: list[LinkRecord] = dc.field(default_factory=list)


class HtmlContentRenderer:
    """Render markdown with consistent styling and link resolution."""

    def __init__(
        self,
        options: RenderOptions | None = None,
        transform_options: TransformOptions | None = None,
    ) -> None:
        """Initialize a renderer.

        Parameters
        ----------
        options : RenderOptions, optional
            Highlight token, heading class, heading-ID and Pygments settings.
            Defaults to :class:`~linkwise.config.RenderOptions`.
        transform_options : TransformOptions, optional
            Link strategy and site slugs used to rewrite internal links; pass
            ``None`` to leave links untouched.
        """
        self.options = options or RenderOptions()
        self.transform_options = transform_options
        self._formatter = HtmlFormatter(
            style=self.options.pygments_style, cssclass="codehilite"
        )

    @property
    def stylesheet(self) -> str:
        """Return the heading-class rule followed by the code highlighting CSS."""
        heading_rule = f".{self.options.heading_class} {{ letter-spacing: 0.02em; }}"
        return f"{heading_rule}\n{self._formatter.get_style_defs('.codehilite')}"

    def markdown(self, text: str, slug: FullSlug | None = None) -> str:
        """Render markdown into HTML, resolving links for ``slug`` when given."""
        return self.render(text, slug).html

    def render(self, text: str, slug: FullSlug | None = None) -> RenderedPage:
        """Render ``text`` and collect the internal links it contains.

        Parameters
        ----------
        text : str
            Markdown body without front matter.
        slug : FullSlug, optional
            Slug of the page being rendered. Links are only rewritten when a
            slug and transform options are both available.

        Returns
        -------
        RenderedPage
            The HTML fragment and one :class:`LinkRecord` per rewritten link.
        """
        normalized = text if text.endswith("\n") else f"{text}\n"
        if not normalized.strip():
            return RenderedPage(html="")

        link_extension: SlugLinkExtension | None = None
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "sane_lists",
            HighlightTokenExtension(self.options.highlight_token),
            HeadingClassExtension(self.options.heading_class),
        ]
        extension_configs: dict[str, dict[str, typ.Any]] = {
            "codehilite": {
                "linenums": False,
                "guess_lang": False,
                "css_class": "codehilite",
                "pygments_style": self.options.pygments_style,
            }
        }
        if self.options.enable_tables:
            extensions.append("tables")
        if self.options.add_heading_ids:
            extensions.append("toc")
            extension_configs["toc"] = {"slugify": _heading_id}
        if slug is not None and self.transform_options is not None:
            link_extension = SlugLinkExtension(slug, self.transform_options)
            extensions.append(link_extension)

        md = Markdown(extensions=extensions, extension_configs=extension_configs)
        html = md.convert(normalized)
        links = list(link_extension.links) if link_extension else []
        return RenderedPage(html=html, links=links)


__all__ = ["HtmlContentRenderer", "RenderedPage"]
