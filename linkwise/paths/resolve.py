"""Relative path computation between full slugs.

Links produced here never reference the site root directly, so the output
works no matter which base path the site is deployed under.

Examples
--------
>>> from linkwise.paths.resolve import path_to_root, resolve_relative
>>> path_to_root("a/b/c")
'../..'
>>> resolve_relative("blog/post", "notes/index")
'../notes/'
"""

from __future__ import annotations

from linkwise._constants import INDEX_SEGMENT

from .primitives import join_segments, strip_slashes, trim_suffix
from .types import FullSlug, RelativeURL, SimpleSlug


def simplify_slug(fp: FullSlug | str) -> SimpleSlug:
    """Collapse a trailing ``index`` segment, returning ``"/"`` for the root."""
    res = strip_slashes(trim_suffix(fp, INDEX_SEGMENT), only_prefix=True)
    return SimpleSlug(res or "/")


def path_to_root(slug: FullSlug | str) -> RelativeURL:
    """Return the ``..`` chain leading from ``slug``'s directory to the root.

    Parameters
    ----------
    slug : FullSlug
        Page slug; its final segment is the page itself and does not count
        as a directory level.

    Returns
    -------
    RelativeURL
        One ``..`` per enclosing directory joined by ``/``, or ``"."`` for
        pages at the root.
    """
    segments = [segment for segment in slug.split("/") if segment]
    root_path = "/".join(".." for _ in segments[:-1])
    return RelativeURL(root_path or ".")


def resolve_relative(current: FullSlug | str, target: FullSlug | SimpleSlug | str) -> RelativeURL:
    """Return the link from page ``current`` to page ``target``."""
    return RelativeURL(join_segments(path_to_root(current), simplify_slug(target)))


__all__ = ["path_to_root", "resolve_relative", "simplify_slug"]
