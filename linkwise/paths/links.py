"""Rewrite author-written links into the canonical relative-slug dialect.

Content links may use raw file names with extensions, ``../`` traversal,
URL-encoded characters or folder shorthand. :func:`transform_internal_link`
normalizes them, and :func:`transform_link` renders the result under one of
three output strategies:

``relative``
    Keep the normalized link relative to the linking document.
``absolute``
    Resolve from the site root, expressed as a ``..`` chain from ``src``.
``shortest``
    Link by bare file name when exactly one page in the site has that name,
    otherwise fall back to ``absolute``.

Examples
--------
>>> from linkwise.paths.links import TransformOptions, transform_link
>>> options = TransformOptions(strategy="relative")
>>> transform_link("a/b", "../c.md", options)
'../c'
>>> options = TransformOptions(strategy="shortest", all_slugs=("notes/c", "a/b"))
>>> transform_link("a/b", "c", options)
'../notes/c'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ
from urllib.parse import unquote

from .anchors import is_folder_path, split_anchor
from .primitives import join_segments, strip_slashes
from .resolve import path_to_root, resolve_relative, simplify_slug
from .slugify import slugify_file_path
from .types import FullSlug, RelativeURL

logger = logging.getLogger(__name__)

LinkStrategy = typ.Literal["absolute", "relative", "shortest"]
LINK_STRATEGIES: tuple[LinkStrategy, ...] = typ.get_args(LinkStrategy)

RELATIVE_SEGMENTS = frozenset({"", ".", ".."})
# Escapes of URI-reserved characters survive decoding, as with ``decodeURI``.
RESERVED_ESCAPE_PATTERN = re.compile(r"(%(?:2[346BCFbcf]|3[ABDFabdf]|40))")


@dc.dataclass(frozen=True, slots=True)
class TransformOptions:
    """Link output strategy plus the complete slug set of the current build.

    Attributes
    ----------
    strategy : LinkStrategy
        One of ``"absolute"``, ``"relative"`` or ``"shortest"``.
    all_slugs : tuple[FullSlug, ...]
        Every full slug known at resolution time, in build order. Only the
        ``shortest`` strategy consults it.
    """

    strategy: LinkStrategy = "absolute"
    all_slugs: tuple[FullSlug, ...] = ()

    def __post_init__(self) -> None:
        """Reject unknown strategies and freeze the slug collection."""
        if self.strategy not in LINK_STRATEGIES:
            msg = (
                f"Unknown link strategy {self.strategy!r}; "
                f"expected one of {', '.join(LINK_STRATEGIES)}."
            )
            raise ValueError(msg)
        if not isinstance(self.all_slugs, tuple):
            object.__setattr__(self, "all_slugs", tuple(self.all_slugs))


def decode_uri(link: str) -> str:
    """Decode percent-escapes in ``link`` except those of reserved characters."""
    parts = RESERVED_ESCAPE_PATTERN.split(link)
    return "".join(
        part if RESERVED_ESCAPE_PATTERN.fullmatch(part) else unquote(part)
        for part in parts
    )


def _split_relative_prefix(segments: list[str]) -> tuple[list[str], list[str]]:
    """Split off the leading run of ``""``, ``.`` and ``..`` segments."""
    idx = 0
    while idx < len(segments) and segments[idx] in RELATIVE_SEGMENTS:
        idx += 1
    return segments[:idx], segments[idx:]


def _add_relative_to_start(s: str) -> str:
    if not s:
        return "."
    if not s.startswith("."):
        return join_segments(".", s)
    return s


def transform_internal_link(link: str) -> RelativeURL:
    """Normalize a content link into an explicit relative slug link.

    The path is decoded, split from its anchor, divided into its leading
    relative prefix and content path, and the content path is slugified and
    simplified. Folder links keep a trailing slash and the result always
    starts with ``.``.

    >>> transform_internal_link("../Some Folder/index.md#My Heading")
    '../Some-Folder/#my-heading'
    >>> transform_internal_link("page.md")
    './page'
    """
    fplike, anchor = split_anchor(decode_uri(link))
    folder_path = is_folder_path(fplike)

    prefix_segments, content_segments = _split_relative_prefix(fplike.split("/"))
    prefix = "/".join(segment for segment in prefix_segments if segment)
    content = "/".join(segment for segment in content_segments if segment)

    simple_slug = simplify_slug(slugify_file_path(content)) if content else ""
    joined = join_segments(strip_slashes(prefix), strip_slashes(simple_slug))
    trail = "/" if folder_path and not joined.endswith("/") else ""
    return RelativeURL(f"{_add_relative_to_start(joined)}{trail}{anchor}")


def _unique_file_name_match(target: str, all_slugs: typ.Iterable[FullSlug]) -> FullSlug | None:
    """Return the only slug whose last segment is ``target``, if exactly one."""
    matches = [slug for slug in all_slugs if slug.rsplit("/", 1)[-1] == target]
    if len(matches) == 1:
        return matches[0]
    if matches:
        logger.debug(
            "Ambiguous shortest link %r matches %d slugs; using full path",
            target,
            len(matches),
        )
    return None


def transform_link(src: FullSlug | str, target: str, options: TransformOptions) -> RelativeURL:
    """Rewrite ``target`` as it appears in page ``src`` for the chosen strategy.

    Parameters
    ----------
    src : FullSlug
        Slug of the page containing the link.
    target : str
        Link as written by the author.
    options : TransformOptions
        Output strategy and, for ``shortest``, the site's slugs.

    Returns
    -------
    RelativeURL
        A link relative to ``src``. Ambiguous ``shortest`` lookups (no match
        or several matches) silently use the ``absolute`` form.
    """
    target_slug = transform_internal_link(target)
    if options.strategy == "relative":
        return target_slug

    folder_tail = "/" if is_folder_path(target_slug) else ""
    canonical_slug = strip_slashes(target_slug[1:])
    target_canonical, target_anchor = split_anchor(canonical_slug)

    if options.strategy == "shortest":
        match = _unique_file_name_match(target_canonical, options.all_slugs)
        if match is not None:
            return RelativeURL(f"{resolve_relative(src, match)}{target_anchor}")

    return RelativeURL(join_segments(path_to_root(src), canonical_slug) + folder_tail)


__all__ = [
    "LINK_STRATEGIES",
    "LinkStrategy",
    "TransformOptions",
    "decode_uri",
    "transform_internal_link",
    "transform_link",
]
