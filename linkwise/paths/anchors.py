"""Folder detection and anchor splitting for link targets."""

from __future__ import annotations

from linkwise._constants import FOLDER_MARKERS, PDF_EXTENSION

from .primitives import ends_with
from .slugify import slug_anchor


def is_folder_path(fplike: str) -> bool:
    """Return whether ``fplike`` denotes a folder page.

    Trailing slashes and trailing ``index``, ``index.md`` or ``index.html``
    segments all mark a folder.

    >>> is_folder_path("folder/")
    True
    >>> is_folder_path("folder/index.md")
    True
    >>> is_folder_path("notes/reindex")
    False
    """
    return fplike.endswith("/") or any(ends_with(fplike, marker) for marker in FOLDER_MARKERS)


def split_anchor(link: str) -> tuple[str, str]:
    """Split ``link`` into its path and ``#``-prefixed anchor.

    Parameters
    ----------
    link : str
        Link text that may carry a fragment.

    Returns
    -------
    tuple[str, str]
        The path and the anchor (``""`` when absent). Anchors are slugified
        with :func:`~linkwise.paths.slugify.slug_anchor` so they match heading
        IDs, except on ``.pdf`` targets where they are viewer directives such
        as ``#page=3`` and pass through unchanged. Only the text up to a
        second ``#`` belongs to the anchor.
    """
    fp, sep, rest = link.partition("#")
    anchor = rest.split("#", 1)[0]
    if not sep:
        return fp, ""
    if fp.endswith(PDF_EXTENSION):
        return fp, f"#{anchor}"
    return fp, f"#{slug_anchor(anchor)}"


__all__ = ["is_folder_path", "split_anchor"]
