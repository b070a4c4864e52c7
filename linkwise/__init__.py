"""Canonical slugs and link resolution for static content publishing.

This package converts source file paths into stable URL-safe slugs and
rewrites in-document links for the absolute, relative and shortest output
strategies. It also ships the build pipeline that consumes the path API:
content discovery, publish filtering, Markdown rendering, and HTML/manifest
emission, driven by the ``linkwise`` CLI.

Exports
-------
- ``slugify_file_path``, ``simplify_slug``, ``transform_link`` and the rest
  of :mod:`linkwise.paths`.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from linkwise import TransformOptions, transform_link
>>> transform_link("notes/today", "../index.md", TransformOptions("relative"))
'../'
"""

from __future__ import annotations

from .cli import app, main
from .paths import (
    LINK_STRATEGIES,
    FilePath,
    FullSlug,
    InvalidPathError,
    LinkStrategy,
    RelativeURL,
    SimpleSlug,
    TransformOptions,
    ends_with,
    get_all_segment_prefixes,
    get_file_extension,
    is_absolute_url,
    is_file_path,
    is_folder_path,
    is_full_slug,
    is_relative_url,
    is_simple_slug,
    join_segments,
    path_to_root,
    resolve_path,
    resolve_relative,
    simplify_slug,
    slug_tag,
    slugify_file_path,
    split_anchor,
    strip_slashes,
    transform_internal_link,
    transform_link,
    trim_suffix,
)

__all__ = [
    "LINK_STRATEGIES",
    "FilePath",
    "FullSlug",
    "InvalidPathError",
    "LinkStrategy",
    "RelativeURL",
    "SimpleSlug",
    "TransformOptions",
    "app",
    "ends_with",
    "get_all_segment_prefixes",
    "get_file_extension",
    "is_absolute_url",
    "is_file_path",
    "is_folder_path",
    "is_full_slug",
    "is_relative_url",
    "is_simple_slug",
    "join_segments",
    "main",
    "path_to_root",
    "resolve_path",
    "resolve_relative",
    "simplify_slug",
    "slug_tag",
    "slugify_file_path",
    "split_anchor",
    "strip_slashes",
    "transform_internal_link",
    "transform_link",
    "trim_suffix",
]
