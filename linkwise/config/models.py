"""Typed dataclasses describing linkwise site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from linkwise._constants import DEFAULT_MANIFEST_SLUG

if typ.TYPE_CHECKING:
    from linkwise.paths import LinkStrategy


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteInfo:
    """Identity of the published site."""

    name: str = "linkwise"
    base_url: str | None = None


@dc.dataclass(slots=True)
class RenderOptions:
    """Markdown rendering switches applied to every page."""

    highlight_token: str = "=="
    heading_class: str = "example-plugin-heading"
    add_heading_ids: bool = True
    enable_tables: bool = True
    pygments_style: str = "monokai"


@dc.dataclass(slots=True)
class FilterOptions:
    """Rules deciding which content files are published."""

    allow_drafts: bool = False
    exclude_tags: list[str] = dc.field(default_factory=lambda: ["private"])
    exclude_path_prefixes: list[str] = dc.field(
        default_factory=lambda: ["_drafts/", "_private/"]
    )


@dc.dataclass(slots=True)
class ManifestOptions:
    """Settings for the JSON content manifest."""

    slug: str = DEFAULT_MANIFEST_SLUG
    include_frontmatter: bool = True
    metadata: dict[str, typ.Any] = dc.field(
        default_factory=lambda: {"generator": "linkwise"}
    )
    transform_manifest: typ.Callable[[str], str] | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved configuration for a site build."""

    content_dir: Path = Path("content")
    output_dir: Path = Path("public")
    strategy: LinkStrategy = "shortest"
    site: SiteInfo = dc.field(default_factory=SiteInfo)
    render: RenderOptions = dc.field(default_factory=RenderOptions)
    filter: FilterOptions = dc.field(default_factory=FilterOptions)
    manifest: ManifestOptions = dc.field(default_factory=ManifestOptions)


__all__ = [
    "FilterOptions",
    "ManifestOptions",
    "RenderOptions",
    "SiteConfig",
    "SiteConfigError",
    "SiteInfo",
]
