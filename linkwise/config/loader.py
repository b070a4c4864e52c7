"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from linkwise.paths import LINK_STRATEGIES, is_full_slug

from .models import (
    FilterOptions,
    ManifestOptions,
    RenderOptions,
    SiteConfig,
    SiteConfigError,
    SiteInfo,
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing a site build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``linkwise.yaml``). Relative ``content_dir`` and ``output_dir``
        values are resolved against the file's directory.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for every missing key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure or a section is not a mapping, the link
        strategy is unknown, or the manifest slug is not a valid full slug.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from linkwise.config import load_site_config
    >>> config = load_site_config(Path("linkwise.yaml"))  # doctest: +SKIP
    >>> config.strategy  # doctest: +SKIP
    'shortest'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    links = _section(raw, "links")
    strategy = links.get("strategy", "shortest")
    if strategy not in LINK_STRATEGIES:
        msg = (
            f"Unknown link strategy '{strategy}'; "
            f"expected one of {', '.join(LINK_STRATEGIES)}."
        )
        raise SiteConfigError(msg)

    return SiteConfig(
        content_dir=_resolve_dir(base_dir, raw.get("content_dir", "content")),
        output_dir=_resolve_dir(base_dir, raw.get("output_dir", "public")),
        strategy=strategy,
        site=_build_site_info(_section(raw, "site")),
        render=_build_render_options(_section(raw, "render")),
        filter=_build_filter_options(_section(raw, "filter")),
        manifest=_build_manifest_options(_section(raw, "manifest")),
    )


def _section(raw: cabc.Mapping[str, typ.Any], key: str) -> cabc.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key``, treating a missing key as empty."""
    value = raw.get(key) or {}
    if not isinstance(value, cabc.Mapping):
        msg = f"Configuration section '{key}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _resolve_dir(base_dir: Path, value: str | Path) -> Path:
    candidate = Path(value)
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _string_list(value: object, key: str) -> list[str]:
    """Coerce a YAML scalar or sequence into a list of non-empty strings."""
    match value:
        case None:
            return []
        case str():
            return [value] if value.strip() else []
        case list() | tuple():
            return [str(item).strip() for item in value if str(item).strip()]
        case _:
            msg = f"'{key}' must be a string or a list of strings."
            raise SiteConfigError(msg)


def _build_site_info(payload: cabc.Mapping[str, typ.Any]) -> SiteInfo:
    base = SiteInfo()
    base_url = payload.get("base_url", base.base_url)
    return SiteInfo(
        name=str(payload.get("name", base.name)),
        base_url=str(base_url).rstrip("/") if base_url else None,
    )


def _build_render_options(payload: cabc.Mapping[str, typ.Any]) -> RenderOptions:
    base = RenderOptions()
    token = str(payload.get("highlight_token", base.highlight_token))
    if not token:
        msg = "'render.highlight_token' must not be empty."
        raise SiteConfigError(msg)
    return RenderOptions(
        highlight_token=token,
        heading_class=str(payload.get("heading_class", base.heading_class)),
        add_heading_ids=bool(payload.get("add_heading_ids", base.add_heading_ids)),
        enable_tables=bool(payload.get("enable_tables", base.enable_tables)),
        pygments_style=str(payload.get("pygments_style", base.pygments_style)),
    )


def _build_filter_options(payload: cabc.Mapping[str, typ.Any]) -> FilterOptions:
    base = FilterOptions()
    return FilterOptions(
        allow_drafts=bool(payload.get("allow_drafts", base.allow_drafts)),
        exclude_tags=_string_list(
            payload.get("exclude_tags", base.exclude_tags), "filter.exclude_tags"
        ),
        exclude_path_prefixes=_string_list(
            payload.get("exclude_path_prefixes", base.exclude_path_prefixes),
            "filter.exclude_path_prefixes",
        ),
    )


def _build_manifest_options(payload: cabc.Mapping[str, typ.Any]) -> ManifestOptions:
    base = ManifestOptions()
    slug = str(payload.get("slug", base.slug))
    if not is_full_slug(slug):
        msg = f"Manifest slug '{slug}' is not a valid full slug."
        raise SiteConfigError(msg)
    metadata = payload.get("metadata", base.metadata) or {}
    if not isinstance(metadata, cabc.Mapping):
        msg = "'manifest.metadata' must be a mapping."
        raise SiteConfigError(msg)
    return ManifestOptions(
        slug=slug,
        include_frontmatter=bool(
            payload.get("include_frontmatter", base.include_frontmatter)
        ),
        metadata=dict(metadata),
    )


__all__ = ["load_site_config"]
