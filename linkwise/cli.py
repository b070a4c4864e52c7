"""Cyclopts CLI entrypoint for building sites and inspecting slugs and links.

The ``linkwise`` console script can build a site from a content directory,
print the canonical slug for source paths, rewrite a single link as it would
appear on a given page, and report broken internal links. Options may also
be supplied through ``LINKWISE_*`` environment variables.

Examples
--------
Build the site described by ``linkwise.yaml``:

>>> from linkwise.cli import main
>>> main()  # doctest: +SKIP

Show how a link resolves under the shortest strategy:

>>> from linkwise.cli import app
>>> app(
...     ["link", "blog/post", "Setup.md", "--strategy", "shortest",
...      "--slug", "guides/Setup"]
... )  # doctest: +SKIP
../guides/Setup
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILENAME
from .build import SiteBuilder
from .config import SiteConfig, load_site_config
from .paths import (
    LinkStrategy,
    TransformOptions,
    as_full_slug,
    slugify_file_path,
    transform_link,
)

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)

app = App(name="linkwise", config=cyclopts.config.Env("LINKWISE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _load_config(
    config: Path,
    *,
    content_dir: Path | None = None,
    output_dir: Path | None = None,
    strategy: LinkStrategy | None = None,
) -> SiteConfig:
    """Load ``config`` when present, otherwise use defaults, then apply overrides."""
    site_config = load_site_config(config) if config.exists() else SiteConfig()
    overrides: dict[str, typ.Any] = {
        "content_dir": content_dir,
        "output_dir": output_dir,
        "strategy": strategy,
    }
    return dc.replace(
        site_config, **{key: value for key, value in overrides.items() if value is not None}
    )


@app.command(help="Render the content directory into static HTML.")
def build(
    *,
    config: typ.Annotated[Path, Parameter(help="Path to site config")] = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path | None, Parameter(help="Override the content folder")
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    strategy: typ.Annotated[
        LinkStrategy | None, Parameter(help="Override the link resolution strategy")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log debug diagnostics")] = False,
) -> None:
    """Build the site and print every written path.

    Parameters
    ----------
    config : Path, optional
        Path to the ``linkwise.yaml`` configuration file. Defaults apply when
        the file does not exist.
    content_dir : Path or None, optional
        Override the configured content directory.
    output_dir : Path or None, optional
        Override the configured output directory.
    strategy : {"absolute", "relative", "shortest"} or None, optional
        Override the configured link strategy.
    verbose : bool, optional
        Enable debug logging for skipped files and ambiguous links.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    site_config = _load_config(
        config, content_dir=content_dir, output_dir=output_dir, strategy=strategy
    )
    for path in SiteBuilder(site_config).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the canonical slug for one or more source paths.")
def slug(
    paths: list[str],
    /,
    *,
    exclude_ext: typ.Annotated[
        bool, Parameter(help="Drop extensions from non-markdown files")
    ] = False,
) -> None:
    """Print ``path -> slug`` for every path argument."""
    for raw in paths:
        print(f"{raw} -> {slugify_file_path(raw, exclude_ext=exclude_ext)}")


@app.command(help="Rewrite a link as it would appear on a page.")
def link(
    src: str,
    target: str,
    /,
    *,
    strategy: typ.Annotated[
        LinkStrategy, Parameter(help="Link resolution strategy")
    ] = "shortest",
    slugs: typ.Annotated[
        list[str] | None,
        Parameter(name="--slug", help="Known site slug (repeatable)"),
    ] = None,
) -> None:
    """Print ``target`` rewritten for page ``src``.

    Raises
    ------
    InvalidPathError
        If ``src`` or any ``--slug`` value is not a valid full slug.
    """
    options = TransformOptions(
        strategy=strategy,
        all_slugs=tuple(as_full_slug(value) for value in slugs or ()),
    )
    print(transform_link(as_full_slug(src), target, options))


@app.command(help="Report internal links that do not resolve to a published page.")
def check(
    *,
    config: typ.Annotated[Path, Parameter(help="Path to site config")] = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path | None, Parameter(help="Override the content folder")
    ] = None,
    strategy: typ.Annotated[
        LinkStrategy | None, Parameter(help="Override the link resolution strategy")
    ] = None,
) -> None:
    """Print broken links and exit with status 1 when any are found."""
    site_config = _load_config(config, content_dir=content_dir, strategy=strategy)
    broken = SiteBuilder(site_config).check()
    for entry in broken:
        print(f"{entry.src}: {entry.target} -> {entry.resolved} (missing)")
    if broken:
        sys.exit(1)
    print("no broken links")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``linkwise`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
