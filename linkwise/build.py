"""High-level orchestration for a site build.

:class:`SiteBuilder` discovers content under the configured directory,
derives the build's complete slug set, filters unpublished files, renders
each page with links rewritten for the configured strategy, and writes
pages, assets, tag listings and the manifest into the output directory.

Example
-------
>>> from pathlib import Path
>>> from linkwise.build import SiteBuilder
>>> from linkwise.config import load_site_config
>>> config = load_site_config(Path("linkwise.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import posixpath
import typing as typ

from linkwise.content import ContentFile, discover_content
from linkwise.emitter import ManifestEmitter, PageEmitter
from linkwise.filter import ContentFilter
from linkwise.paths import (
    FullSlug,
    TransformOptions,
    join_segments,
    split_anchor,
    strip_slashes,
)
from linkwise.renderer import HtmlContentRenderer, LinkRecord

if typ.TYPE_CHECKING:
    from pathlib import Path

    from linkwise.config import SiteConfig

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class BrokenLink:
    """An internal link whose resolved slug is not part of the build."""

    src: str
    target: str
    resolved: str


def resolve_link_slug(src: str, href: str) -> FullSlug:
    """Return the full slug a rewritten ``href`` on page ``src`` points at.

    Folder links (``"../notes/"``) resolve to the folder's ``index`` slug and
    links to the site root resolve to ``"index"``.

    >>> resolve_link_slug("a/b", "../notes/")
    'notes/index'
    >>> resolve_link_slug("a/b", "./c#intro")
    'a/c'
    """
    path, _anchor = split_anchor(href)
    joined = posixpath.normpath(posixpath.join(posixpath.dirname(src), path))
    while joined.startswith("../"):
        joined = joined[3:]
    resolved = strip_slashes(joined) if joined not in (".", "..") else ""
    if not resolved or path.endswith("/"):
        resolved = join_segments(resolved, "index")
    return FullSlug(resolved)


def find_broken_links(
    links: typ.Iterable[LinkRecord], all_slugs: typ.Collection[str]
) -> list[BrokenLink]:
    """Return the links whose resolved slug is missing from ``all_slugs``."""
    known = set(all_slugs)
    broken: list[BrokenLink] = []
    for link in links:
        resolved = resolve_link_slug(link.src, link.href)
        if resolved not in known:
            broken.append(BrokenLink(src=link.src, target=link.target, resolved=resolved))
    return broken


class SiteBuilder:
    """Render every published content file into the output directory."""

    def __init__(self, config: SiteConfig) -> None:
        self.config = config
        self.content_filter = ContentFilter(config.filter)
        self.links: list[LinkRecord] = []

    def collect(self) -> tuple[list[ContentFile], TransformOptions]:
        """Return the publishable files and the transform options for them.

        ``all_slugs`` contains the slugs of published files only, so links to
        filtered drafts are reported as broken rather than silently resolved.
        When two files share a slug (``raw.md`` and ``raw.html``) the first in
        discovery order wins and the other is skipped with a warning.
        """
        published: list[ContentFile] = []
        owners: dict[str, ContentFile] = {}
        for content in self.content_filter.select(discover_content(self.config.content_dir)):
            owner = owners.get(content.slug)
            if owner is not None:
                logger.warning(
                    "Skipping %s: slug %r is already used by %s",
                    content.file_path,
                    content.slug,
                    owner.file_path,
                )
                continue
            owners[content.slug] = content
            published.append(content)
        options = TransformOptions(
            strategy=self.config.strategy,
            all_slugs=tuple(content.slug for content in published),
        )
        logger.debug(
            "Collected %d publishable files using %s links",
            len(published),
            options.strategy,
        )
        return published, options

    def run(self) -> list[Path]:
        """Build the site and return the written paths in emission order."""
        published, options = self.collect()
        renderer = HtmlContentRenderer(self.config.render, options)
        pages = [content for content in published if content.is_page]
        assets = [content for content in published if not content.is_page]

        page_emitter = PageEmitter(
            self.config.site,
            self.config.output_dir,
            stylesheet=renderer.stylesheet,
        )
        written: list[Path] = []
        self.links = []
        for page in pages:
            rendered = renderer.render(page.body, page.slug)
            self.links.extend(rendered.links)
            written.append(page_emitter.emit_page(page, rendered.html))
        written.extend(page_emitter.emit_asset(asset) for asset in assets)
        written.extend(page_emitter.emit_tag_pages(pages))
        written.append(ManifestEmitter(self.config.manifest, self.config.output_dir).emit(pages))
        return written

    def check(self) -> list[BrokenLink]:
        """Render every page without writing output and report broken links."""
        published, options = self.collect()
        renderer = HtmlContentRenderer(self.config.render, options)
        links: list[LinkRecord] = []
        for page in published:
            if page.is_page:
                links.extend(renderer.render(page.body, page.slug).links)
        return find_broken_links(links, options.all_slugs)


__all__ = [
    "BrokenLink",
    "SiteBuilder",
    "find_broken_links",
    "resolve_link_slug",
]
