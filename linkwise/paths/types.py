"""Branded string types for the slug dialect.

The four path categories are plain ``str`` values at runtime. ``NewType``
aliases let type checkers keep them apart, and the ``as_*`` constructors
validate a raw string with the matching classifier predicate before branding
it. Callers use the constructors at input boundaries (configuration, CLI
arguments); the pure path functions never re-validate their arguments.
"""

from __future__ import annotations

import typing as typ

from .classify import is_file_path, is_full_slug, is_relative_url, is_simple_slug

FilePath = typ.NewType("FilePath", str)
FullSlug = typ.NewType("FullSlug", str)
SimpleSlug = typ.NewType("SimpleSlug", str)
RelativeURL = typ.NewType("RelativeURL", str)


class InvalidPathError(ValueError):
    """Raised when a string does not belong to the requested path category."""


def _brand(value: str, predicate: typ.Callable[[str], bool], kind: str) -> str:
    if not predicate(value):
        msg = f"{value!r} is not a valid {kind}."
        raise InvalidPathError(msg)
    return value


def as_file_path(value: str) -> FilePath:
    """Return ``value`` branded as a :data:`FilePath` after validation."""
    return FilePath(_brand(value, is_file_path, "file path"))


def as_full_slug(value: str) -> FullSlug:
    """Return ``value`` branded as a :data:`FullSlug` after validation.

    Raises
    ------
    InvalidPathError
        If ``value`` starts with ``.`` or ``/``, ends with ``/``, or contains a
        forbidden character.
    """
    return FullSlug(_brand(value, is_full_slug, "full slug"))


def as_simple_slug(value: str) -> SimpleSlug:
    """Return ``value`` branded as a :data:`SimpleSlug` after validation."""
    return SimpleSlug(_brand(value, is_simple_slug, "simple slug"))


def as_relative_url(value: str) -> RelativeURL:
    """Return ``value`` branded as a :data:`RelativeURL` after validation."""
    return RelativeURL(_brand(value, is_relative_url, "relative URL"))


__all__ = [
    "FilePath",
    "FullSlug",
    "InvalidPathError",
    "RelativeURL",
    "SimpleSlug",
    "as_file_path",
    "as_full_slug",
    "as_relative_url",
    "as_simple_slug",
]
