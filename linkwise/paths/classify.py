"""Structural predicates deciding which path category a string belongs to.

The categories are disjoint by construction: relative URLs always start with
``.`` while full and simple slugs never do, and only file paths require an
extension. Every predicate is total and never raises.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from linkwise._constants import FORBIDDEN_SLUG_CHARACTERS, INDEX_SEGMENT, MARKUP_EXTENSIONS

from .primitives import ends_with, get_file_extension, has_file_extension

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def _contains_forbidden_characters(s: str) -> bool:
    return any(char in s for char in FORBIDDEN_SLUG_CHARACTERS)


def is_file_path(s: str) -> bool:
    """Return whether ``s`` looks like a source path with an extension."""
    return not s.startswith(".") and has_file_extension(s)


def is_full_slug(s: str) -> bool:
    """Return whether ``s`` is a canonical full slug.

    Full slugs have no leading ``.`` or ``/``, no trailing ``/`` and none of
    the characters in ``FORBIDDEN_SLUG_CHARACTERS``. A trailing ``index``
    segment is allowed.
    """
    valid_start = not s.startswith((".", "/"))
    valid_ending = not s.endswith("/")
    return valid_start and valid_ending and not _contains_forbidden_characters(s)


def is_simple_slug(s: str) -> bool:
    """Return whether ``s`` is a simple slug.

    The root page ``"/"`` is the only simple slug allowed to start with a
    slash. Simple slugs never end with an ``index`` segment and never carry
    an extension, but folder slugs may keep a trailing slash.
    """
    valid_start = not (s.startswith(".") or (len(s) > 1 and s.startswith("/")))
    valid_ending = not ends_with(s, INDEX_SEGMENT)
    return (
        valid_start
        and valid_ending
        and not _contains_forbidden_characters(s)
        and not has_file_extension(s)
    )


def is_relative_url(s: str) -> bool:
    """Return whether ``s`` is an explicit ``./`` or ``../`` reference."""
    valid_start = s.startswith(".")
    valid_ending = not ends_with(s, INDEX_SEGMENT)
    return valid_start and valid_ending and get_file_extension(s) not in MARKUP_EXTENSIONS


def is_absolute_url(s: str) -> bool:
    """Return whether ``s`` parses as an absolute URL with a scheme.

    Web schemes (``http``, ``https``, ``ftp``, ``ws``, ``wss``) must also name
    a host. Unparsable input yields ``False``.

    >>> is_absolute_url("https://example.com/page")
    True
    >>> is_absolute_url("mailto:someone@example.com")
    True
    >>> is_absolute_url("../notes/page")
    False
    """
    if not SCHEME_PATTERN.match(s):
        return False
    try:
        parsed = urlsplit(s)
    except ValueError:
        return False
    if parsed.scheme in HOST_REQUIRED_SCHEMES:
        return bool(parsed.hostname)
    return True


__all__ = [
    "is_absolute_url",
    "is_file_path",
    "is_full_slug",
    "is_relative_url",
    "is_simple_slug",
]
