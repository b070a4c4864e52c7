"""Slug model and link resolution for published content.

The path API converts source file paths into canonical slugs, classifies
strings into the four path categories, and rewrites content links for the
absolute, relative and shortest output strategies. Every function is pure
and safe to call from any thread.

Examples
--------
>>> from linkwise.paths import simplify_slug, slugify_file_path
>>> simplify_slug(slugify_file_path("guides/_index.md"))
'guides/'
"""

from .anchors import is_folder_path, split_anchor
from .classify import (
    is_absolute_url,
    is_file_path,
    is_full_slug,
    is_relative_url,
    is_simple_slug,
)
from .links import (
    LINK_STRATEGIES,
    LinkStrategy,
    TransformOptions,
    decode_uri,
    transform_internal_link,
    transform_link,
)
from .primitives import (
    ends_with,
    get_all_segment_prefixes,
    get_file_extension,
    join_segments,
    resolve_path,
    strip_slashes,
    trim_suffix,
)
from .resolve import path_to_root, resolve_relative, simplify_slug
from .slugify import slug_anchor, slug_tag, slugify_file_path
from .types import (
    FilePath,
    FullSlug,
    InvalidPathError,
    RelativeURL,
    SimpleSlug,
    as_file_path,
    as_full_slug,
    as_relative_url,
    as_simple_slug,
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
    "as_file_path",
    "as_full_slug",
    "as_relative_url",
    "as_simple_slug",
    "decode_uri",
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
    "path_to_root",
    "resolve_path",
    "resolve_relative",
    "simplify_slug",
    "slug_anchor",
    "slug_tag",
    "slugify_file_path",
    "split_anchor",
    "strip_slashes",
    "transform_internal_link",
    "transform_link",
    "trim_suffix",
]
