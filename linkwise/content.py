r"""Discover content files and parse their YAML front matter.

Markdown and HTML files become pages, matching the markup extensions that
slugification drops; every other file under the content root is a static
asset that keeps its extension in its slug. Slugs come from
:func:`~linkwise.paths.slugify_file_path` applied to the POSIX path relative
to the content root, so the same tree yields the same slugs on every
platform.

Example
-------
>>> from linkwise.content import split_front_matter
>>> meta, body = split_front_matter("---\ntitle: Hello\n---\nBody\n")
>>> meta["title"], body
('Hello', 'Body\n')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from linkwise._constants import MARKUP_EXTENSIONS
from linkwise.paths import FilePath, FullSlug, slugify_file_path

if typ.TYPE_CHECKING:
    from pathlib import Path

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)


class FrontMatterError(ValueError):
    """Raised when a file's front matter is not a YAML mapping."""


@dc.dataclass(slots=True)
class ContentFile:
    """A single file discovered under the content root.

    Attributes
    ----------
    file_path : FilePath
        POSIX path relative to the content root.
    slug : FullSlug
        Canonical slug derived from ``file_path``.
    source : Path
        Absolute location on disk.
    frontmatter : dict[str, Any]
        Parsed front matter; empty for assets and pages without a header.
    body : str
        Markdown without the front matter block; empty for assets.
    """

    file_path: FilePath
    slug: FullSlug
    source: Path
    frontmatter: dict[str, typ.Any] = dc.field(default_factory=dict)
    body: str = ""

    @property
    def is_page(self) -> bool:
        """Return whether this file is a markup page rather than an asset."""
        return self.file_path.lower().endswith(MARKUP_EXTENSIONS)

    @property
    def title(self) -> str:
        """Return the front matter title, falling back to the last slug segment."""
        title = self.frontmatter.get("title")
        if isinstance(title, str) and title.strip():
            return title.strip()
        return self.file_path.rsplit("/", 1)[-1].rsplit(".", 1)[0]

    @property
    def tags(self) -> list[str]:
        """Return stripped string tags, ignoring blank and malformed values."""
        tags = self.frontmatter.get("tags")
        if isinstance(tags, str):
            tags = [tags]
        if not isinstance(tags, list):
            return []
        return [tag.strip() for tag in tags if isinstance(tag, str) and tag.strip()]


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining markdown.

    Raises
    ------
    FrontMatterError
        If the front matter block is not valid YAML or not a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1) or "")
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


def load_content_file(content_dir: Path, source: Path) -> ContentFile:
    """Build a :class:`ContentFile` for ``source`` located under ``content_dir``."""
    file_path = FilePath(source.relative_to(content_dir).as_posix())
    content = ContentFile(
        file_path=file_path,
        slug=slugify_file_path(file_path),
        source=source,
    )
    if content.is_page:
        text = source.read_text(encoding="utf-8")
        try:
            content.frontmatter, content.body = split_front_matter(text)
        except FrontMatterError as exc:
            msg = f"{file_path}: {exc}"
            raise FrontMatterError(msg) from exc
    return content


def discover_content(content_dir: Path) -> list[ContentFile]:
    """Return every file under ``content_dir`` in a deterministic order.

    Hidden files and directories (names starting with ``.``) are skipped.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    """
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)

    files: list[ContentFile] = []
    for source in sorted(content_dir.rglob("*")):
        relative = source.relative_to(content_dir)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if source.is_file():
            files.append(load_content_file(content_dir, source))
    return files


__all__ = [
    "ContentFile",
    "FrontMatterError",
    "discover_content",
    "load_content_file",
    "split_front_matter",
]
