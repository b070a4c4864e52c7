"""Turn source file paths, tags, and heading text into slug strings.

``SEGMENT_SUBSTITUTIONS`` is the one character table shared by file and tag
slugification. ``slug_anchor`` is the heading-ID algorithm; the renderer uses
it for heading ``id`` attributes and :func:`~linkwise.paths.split_anchor`
uses it for link fragments, so both sides always agree.

Examples
--------
>>> from linkwise.paths.slugify import slugify_file_path, slug_tag
>>> slugify_file_path("notes/Tom & Jerry.md")
'notes/Tom--and--Jerry'
>>> slugify_file_path("papers/attention.pdf")
'papers/attention.pdf'
>>> slug_tag("status/in progress")
'status/in-progress'
"""

from __future__ import annotations

import re

from linkwise._constants import (
    ESCAPED_INDEX_SEGMENT,
    INDEX_SEGMENT,
    MARKUP_EXTENSIONS,
)

from .primitives import ends_with, get_file_extension, strip_slashes
from .types import FilePath, FullSlug

SEGMENT_SUBSTITUTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\s"), "-"),
    (re.compile(r"&"), "-and-"),
    (re.compile(r"%"), "-percent"),
    (re.compile(r"\?"), ""),
    (re.compile(r"#"), ""),
)
ANCHOR_STRIP_PATTERN = re.compile(r"[^\w\- ]")


def _slugify_segment(segment: str) -> str:
    for pattern, replacement in SEGMENT_SUBSTITUTIONS:
        segment = pattern.sub(replacement, segment)
    return segment


def _slugify_segments(path: str) -> str:
    """Apply the substitution table per segment and drop a trailing slash."""
    slug = "/".join(_slugify_segment(segment) for segment in path.split("/"))
    return slug.removesuffix("/")


def slugify_file_path(fp: FilePath | str, exclude_ext: bool = False) -> FullSlug:  # noqa: FBT001, FBT002
    """Return the canonical full slug for a source file path.

    Parameters
    ----------
    fp : FilePath or str
        Path relative to the content root. Backslash separators are treated
        as ``/`` so Windows paths slugify identically.
    exclude_ext : bool, optional
        Drop the extension even for non-markup files.

    Returns
    -------
    FullSlug
        Slug without ``.md``/``.html`` extensions, with a trailing
        ``_index`` segment rewritten to ``index``. Other extensions (for
        example ``.pdf``) are kept unless ``exclude_ext`` is set.
    """
    fp = strip_slashes(fp.replace("\\", "/"))
    ext = get_file_extension(fp)
    without_ext = fp[: -len(ext)] if ext else fp
    if exclude_ext or ext is None or ext in MARKUP_EXTENSIONS:
        ext = ""

    slug = _slugify_segments(without_ext)
    if ends_with(slug, ESCAPED_INDEX_SEGMENT):
        slug = slug[: -len(ESCAPED_INDEX_SEGMENT)] + INDEX_SEGMENT
    return FullSlug(slug + ext)


def slug_tag(tag: str) -> str:
    """Slugify each ``/``-delimited component of a hierarchical tag."""
    return "/".join(_slugify_segment(part) for part in tag.split("/"))


def slug_anchor(text: str) -> str:
    """Return the heading identifier for ``text``.

    Lowercases the text, removes everything except word characters, spaces
    and hyphens, then turns each space into a hyphen. Spaces are not
    collapsed, matching GitHub-style heading IDs.

    >>> slug_anchor("Getting Started: Part 2!")
    'getting-started-part-2'
    """
    return ANCHOR_STRIP_PATTERN.sub("", text.lower()).replace(" ", "-")


__all__ = [
    "SEGMENT_SUBSTITUTIONS",
    "slug_anchor",
    "slug_tag",
    "slugify_file_path",
]
