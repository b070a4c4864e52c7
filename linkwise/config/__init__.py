"""Load and validate site configuration YAML for linkwise builds.

This subpackage parses the project's ``linkwise.yaml`` file, applies defaults
for every omitted section, validates the link strategy and manifest slug, and
produces dataclasses (:class:`SiteConfig`, :class:`RenderOptions`, etc.) that
the build pipeline consumes. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from linkwise.config import load_site_config
>>> site = load_site_config(Path("linkwise.yaml"))  # doctest: +SKIP
>>> site.filter.exclude_tags  # doctest: +SKIP
['private']
"""

from .loader import load_site_config
from .models import (
    FilterOptions,
    ManifestOptions,
    RenderOptions,
    SiteConfig,
    SiteConfigError,
    SiteInfo,
)

__all__ = [
    "FilterOptions",
    "ManifestOptions",
    "RenderOptions",
    "SiteConfig",
    "SiteConfigError",
    "SiteInfo",
    "load_site_config",
]
