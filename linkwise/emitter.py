"""Write rendered pages, static assets, tag listings and the JSON manifest.

Every output file lives at ``<output_dir>/<slug><ext>``: pages add ``.html``
to their full slug (so ``notes/index`` becomes ``notes/index.html``), assets
keep the extension already present in their slug, and the manifest adds
``.json``. All links written into templates are computed with
:func:`~linkwise.paths.resolve_relative`, so the output works under any
deployment base path.

Example
-------
>>> from pathlib import Path
>>> from linkwise.emitter import output_path
>>> output_path(Path("public"), "notes/index", ".html").as_posix()
'public/notes/index.html'
"""

from __future__ import annotations

import datetime as dt
import shutil
import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
from jinja2 import Environment, FileSystemLoader, select_autoescape

from linkwise.config import ManifestOptions, SiteInfo
from linkwise.paths import (
    FullSlug,
    get_all_segment_prefixes,
    path_to_root,
    resolve_relative,
    simplify_slug,
    slug_tag,
    strip_slashes,
)

if typ.TYPE_CHECKING:
    from linkwise.content import ContentFile

TAGS_ROOT = "tags"
DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def output_path(output_dir: Path, slug: str, ext: str = "") -> Path:
    """Return the file written for ``slug`` with extension ``ext``."""
    return output_dir / f"{slug}{ext}"


def _write_text(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _tag_path(tag: str) -> str:
    """Return the slugified tag with empty components dropped."""
    return "/".join(part for part in slug_tag(tag.strip()).split("/") if part)


def tag_slug(tag: str) -> FullSlug:
    """Return the slug of the listing page for ``tag``."""
    return FullSlug(f"{TAGS_ROOT}/{_tag_path(tag)}")


class PageEmitter:
    """Render page and tag-listing HTML through the Jinja page template."""

    def __init__(
        self,
        site: SiteInfo,
        output_dir: Path,
        *,
        templates_dir: Path | None = None,
        stylesheet: str = "",
    ) -> None:
        """Initialize the emitter.

        Parameters
        ----------
        site : SiteInfo
            Site identity shown in titles and breadcrumbs.
        output_dir : Path
            Root directory receiving the generated files.
        templates_dir : Path, optional
            Directory containing ``page.jinja``; defaults to the package
            templates.
        stylesheet : str, optional
            CSS inlined into every page (typically the Pygments styles).
        """
        self.site = site
        self.output_dir = output_dir
        self.stylesheet = stylesheet
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    def emit_page(self, content: ContentFile, html: str) -> Path:
        """Write the HTML page for ``content`` and return its path."""
        slug = content.slug
        tags = [
            {"label": tag, "href": resolve_relative(slug, tag_slug(tag))}
            for tag in content.tags
            if _tag_path(tag)
        ]
        rendered = self.template.render(
            **self._base_context(slug),
            title=content.title,
            tags=tags,
            content=html,
        )
        return _write_text(output_path(self.output_dir, slug, ".html"), rendered)

    def emit_asset(self, content: ContentFile) -> Path:
        """Copy a static asset to its slug location and return the new path."""
        destination = output_path(self.output_dir, content.slug)
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(content.source, destination)
        return destination

    def emit_tag_pages(self, pages: typ.Sequence[ContentFile]) -> list[Path]:
        """Write one listing page per tag and per tag ancestor.

        A page tagged ``lang/python`` appears on both ``tags/lang`` and
        ``tags/lang/python``.
        """
        members: dict[str, list[ContentFile]] = {}
        for page in pages:
            for tag in page.tags:
                path = _tag_path(tag)
                if not path:
                    continue
                for prefix in get_all_segment_prefixes(path):
                    bucket = members.setdefault(prefix, [])
                    if page not in bucket:
                        bucket.append(page)

        written: list[Path] = []
        for tag in sorted(members):
            slug = FullSlug(f"{TAGS_ROOT}/{tag}")
            entries = [
                {"title": page.title, "href": resolve_relative(slug, page.slug)}
                for page in members[tag]
            ]
            rendered = self.template.render(
                **self._base_context(slug),
                title=f"Tag: {tag}",
                tags=[],
                content="",
                entries=entries,
            )
            written.append(
                _write_text(output_path(self.output_dir, slug, ".html"), rendered)
            )
        return written

    def _canonical_url(self, slug: FullSlug) -> str | None:
        """Return the absolute URL of ``slug`` when the site has a base URL."""
        if not self.site.base_url:
            return None
        return f"{self.site.base_url}/{strip_slashes(simplify_slug(slug), only_prefix=True)}"

    def _base_context(self, slug: FullSlug) -> dict[str, typ.Any]:
        """Return template values shared by pages and tag listings."""
        folders = slug.split("/")[:-1]
        breadcrumbs = [
            {
                "label": prefix.rsplit("/", 1)[-1].replace("-", " "),
                "href": resolve_relative(slug, f"{prefix}/index"),
            }
            for prefix in (get_all_segment_prefixes("/".join(folders)) if folders else [])
        ]
        return {
            "site": self.site,
            "slug": slug,
            "base": path_to_root(slug),
            "home_href": resolve_relative(slug, "index"),
            "breadcrumbs": breadcrumbs,
            "canonical_url": self._canonical_url(slug),
            "stylesheet": self.stylesheet,
        }


class ManifestEmitter:
    """Write a JSON manifest describing every published page."""

    def __init__(self, options: ManifestOptions, output_dir: Path) -> None:
        self.options = options
        self.output_dir = output_dir

    def build_manifest(
        self,
        pages: typ.Sequence[ContentFile],
        *,
        generated_at: dt.datetime | None = None,
    ) -> dict[str, typ.Any]:
        """Return the manifest mapping for ``pages``.

        Configured metadata keys come first, followed by ``generatedAt`` and
        ``pages``. Each page entry carries ``slug``, ``title``, ``tags`` and
        ``filePath``, plus ``frontmatter`` when enabled.
        """
        timestamp = (generated_at or dt.datetime.now(dt.UTC)).isoformat()
        entries: list[dict[str, typ.Any]] = []
        for page in pages:
            frontmatter = page.frontmatter
            entry: dict[str, typ.Any] = {
                "slug": page.slug,
                "title": frontmatter.get("title"),
                "tags": frontmatter.get("tags"),
                "filePath": page.file_path,
            }
            if self.options.include_frontmatter:
                entry["frontmatter"] = frontmatter
            entries.append(entry)
        return {**self.options.metadata, "generatedAt": timestamp, "pages": entries}

    def render(self, pages: typ.Sequence[ContentFile]) -> str:
        """Return the manifest as indented JSON with a trailing newline."""
        encoded = msgspec_json.format(
            msgspec_json.encode(self.build_manifest(pages)), indent=2
        )
        text = f"{encoded.decode('utf-8')}\n"
        if self.options.transform_manifest:
            text = self.options.transform_manifest(text)
        return text

    def emit(self, pages: typ.Sequence[ContentFile]) -> Path:
        """Write the manifest to ``<output_dir>/<slug>.json``."""
        path = output_path(self.output_dir, self.options.slug, ".json")
        return _write_text(path, self.render(pages))


__all__ = [
    "ManifestEmitter",
    "PageEmitter",
    "output_path",
    "tag_slug",
]
