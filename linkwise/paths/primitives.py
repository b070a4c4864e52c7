"""Slash, suffix, and segment helpers underlying every slug operation.

Suffix checks here are segment-aware: a suffix only matches when it occupies
a whole trailing ``/``-delimited segment, so ``"myindex"`` does not end with
``"index"`` while ``"folder/index"`` does.

Examples
--------
>>> from linkwise.paths.primitives import join_segments, trim_suffix
>>> join_segments("/a/", "/b/", "c")
'/a/b/c'
>>> trim_suffix("folder/index", "index")
'folder/'
"""

from __future__ import annotations

import re

EXTENSION_PATTERN = re.compile(r"\.[A-Za-z0-9]+$")


def strip_slashes(s: str, only_prefix: bool = False) -> str:  # noqa: FBT001, FBT002
    """Remove one leading slash and, unless ``only_prefix``, one trailing slash.

    Parameters
    ----------
    s : str
        Path-like string to strip.
    only_prefix : bool, optional
        When ``True`` a trailing slash is kept, which preserves the folder
        marker of simple slugs such as ``"folder/"``.

    Returns
    -------
    str
        ``s`` without the boundary slashes.
    """
    if s.startswith("/"):
        s = s[1:]
    if not only_prefix and s.endswith("/"):
        s = s[:-1]
    return s


def ends_with(s: str, suffix: str) -> bool:
    """Return whether ``suffix`` is ``s`` or its whole trailing segment."""
    return s == suffix or s.endswith(f"/{suffix}")


def trim_suffix(s: str, suffix: str) -> str:
    """Drop ``suffix`` from ``s`` when it is the trailing segment.

    The separating slash is kept, so ``trim_suffix("folder/index", "index")``
    yields ``"folder/"``. Partial-token matches are left untouched.
    """
    if suffix and ends_with(s, suffix):
        s = s[: -len(suffix)]
    return s


def join_segments(*parts: str) -> str:
    """Join path parts with single slashes.

    Each part loses every slash on either side, and parts left empty are
    dropped. A leading slash on the first part and a trailing slash on the
    last part survive the join as a single slash.

    Parameters
    ----------
    *parts : str
        Path fragments in order.

    Returns
    -------
    str
        The joined path; ``""`` when called without arguments.

    Examples
    --------
    >>> join_segments("a", "", "c")
    'a/c'
    >>> join_segments("a", "b/")
    'a/b/'
    >>> join_segments("//a", "b")
    '/a/b'
    """
    if not parts:
        return ""

    joined = "/".join(part.strip("/") for part in parts if part.strip("/"))
    if parts[0].startswith("/"):
        joined = f"/{joined}"
    if parts[-1].endswith("/") and not joined.endswith("/"):
        joined = f"{joined}/"
    return joined


def resolve_path(to: str) -> str:
    """Return ``to`` as an absolute site path with a leading slash."""
    if to.startswith("/"):
        return to
    return f"/{to}"


def get_file_extension(s: str) -> str | None:
    """Return the final ``.ext`` group of ``s`` or ``None`` when absent.

    Only the last dot group counts: ``archive.tar.gz`` reports ``.gz``.
    """
    match = EXTENSION_PATTERN.search(s)
    return match.group(0) if match else None


def has_file_extension(s: str) -> bool:
    """Return whether ``s`` carries a recognizable file extension."""
    return get_file_extension(s) is not None


def get_all_segment_prefixes(path: str) -> list[str]:
    """Return every leading segment prefix of ``path``.

    >>> get_all_segment_prefixes("programming/web/react")
    ['programming', 'programming/web', 'programming/web/react']
    """
    segments = path.split("/")
    return ["/".join(segments[: idx + 1]) for idx in range(len(segments))]


__all__ = [
    "EXTENSION_PATTERN",
    "ends_with",
    "get_all_segment_prefixes",
    "get_file_extension",
    "has_file_extension",
    "join_segments",
    "resolve_path",
    "strip_slashes",
    "trim_suffix",
]
