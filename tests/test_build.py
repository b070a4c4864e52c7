"""End-to-end tests for :class:`linkwise.build.SiteBuilder`.

The ``site_root``/``site_config`` fixtures from ``conftest.py`` create a small
content tree containing pages, an image, a tagged private note and a draft
folder. The tests build it with the default ``shortest`` link strategy and
inspect the written HTML with BeautifulSoup.
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup

from linkwise.build import BrokenLink, SiteBuilder, find_broken_links, resolve_link_slug
from linkwise.config import SiteConfig
from linkwise.renderer import LinkRecord

if typ.TYPE_CHECKING:
    from pathlib import Path


def _hrefs(path: Path) -> list[str]:
    soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
    return [str(a.get("href")) for a in soup.select("article a:not(.tag-link)")]


@pytest.mark.parametrize(
    ("src", "href", "expected"),
    [
        ("a/b", "../notes/", "notes/index"),
        ("a/b", "./c#intro", "a/c"),
        ("index", "./", "index"),
        ("guides/Setup", "../", "index"),
        ("notes/today", "../images/diagram.png", "images/diagram.png"),
        ("a", "../../../escape", "escape"),
    ],
)
def test_resolve_link_slug(src: str, href: str, expected: str) -> None:
    """Rewritten hrefs map back onto the full slug they reach."""
    assert resolve_link_slug(src, href) == expected


def test_find_broken_links_reports_missing_targets() -> None:
    """Only links to unknown slugs are reported."""
    links = [
        LinkRecord(src="a/b", target="c.md", href="./c"),
        LinkRecord(src="a/b", target="gone.md", href="../gone"),
    ]
    assert find_broken_links(links, {"a/b", "a/c"}) == [
        BrokenLink(src="a/b", target="gone.md", resolved="gone")
    ]


def test_collect_filters_and_lists_slugs(site_config: SiteConfig) -> None:
    """Unpublished files are excluded from the slug set."""
    published, options = SiteBuilder(site_config).collect()

    assert options.strategy == "shortest"
    assert options.all_slugs == (
        "guides/Setup",
        "images/diagram.png",
        "index",
        "notes/index",
        "notes/today",
    )
    assert [item.slug for item in published] == list(options.all_slugs)


def test_run_writes_every_output(site_config: SiteConfig) -> None:
    """Pages, assets, tag listings and the manifest are written in order."""
    written = SiteBuilder(site_config).run()

    assert [path.relative_to(site_config.output_dir).as_posix() for path in written] == [
        "guides/Setup.html",
        "index.html",
        "notes/index.html",
        "notes/today.html",
        "images/diagram.png",
        "tags/guides.html",
        "tags/guides/install.html",
        "plugin-manifest.json",
    ]
    assert not (site_config.output_dir / "notes" / "secret.html").exists()
    assert not (site_config.output_dir / "_drafts").exists()


def test_run_rewrites_links_with_shortest_strategy(site_config: SiteConfig) -> None:
    """Unique names link directly; everything else resolves from the root."""
    SiteBuilder(site_config).run()
    output = site_config.output_dir

    assert _hrefs(output / "index.html") == ["./guides/Setup", "./notes/"]
    assert _hrefs(output / "guides" / "Setup.html") == ["../", "../notes/today#morning-plan"]
    assert _hrefs(output / "notes" / "index.html") == ["../notes/today", "../ghost"]

    today = BeautifulSoup(
        (output / "notes" / "today.html").read_text(encoding="utf-8"), "html.parser"
    )
    image = today.select_one("article img")
    assert image is not None
    assert image.get("src") == "../images/diagram.png"
    assert today.select_one("h2#morning-plan") is not None


def test_run_with_relative_strategy(site_config: SiteConfig) -> None:
    """The relative strategy keeps author paths relative to the page."""
    config = dc.replace(site_config, strategy="relative")
    SiteBuilder(config).run()

    assert _hrefs(config.output_dir / "index.html") == ["./Setup", "./notes/"]


def test_run_writes_manifest(site_config: SiteConfig) -> None:
    """The manifest lists every published page."""
    SiteBuilder(site_config).run()
    manifest = json.loads(
        (site_config.output_dir / "plugin-manifest.json").read_text(encoding="utf-8")
    )

    assert manifest["generator"] == "linkwise"
    assert [page["slug"] for page in manifest["pages"]] == [
        "guides/Setup",
        "index",
        "notes/index",
        "notes/today",
    ]


def test_run_records_links(site_config: SiteConfig) -> None:
    """The builder keeps every rewritten link from the last run."""
    builder = SiteBuilder(site_config)
    builder.run()
    assert len(builder.links) == 7
    assert {link.src for link in builder.links} == {
        "guides/Setup",
        "index",
        "notes/index",
        "notes/today",
    }


def test_check_reports_missing_page(site_config: SiteConfig) -> None:
    """Links to pages outside the build are broken."""
    assert SiteBuilder(site_config).check() == [
        BrokenLink(src="notes/index", target="ghost.md", resolved="ghost")
    ]


def test_collect_skips_duplicate_slugs(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """HTML sources are pages and a second file with the same slug is skipped."""
    content_dir = tmp_path / "content"
    content_dir.mkdir()
    (content_dir / "index.md").write_text("Home\n", encoding="utf-8")
    (content_dir / "raw.html").write_text("<p>Raw</p>\n", encoding="utf-8")
    (content_dir / "raw.md").write_text("Markdown\n", encoding="utf-8")
    config = SiteConfig(content_dir=content_dir, output_dir=tmp_path / "public")

    with caplog.at_level(logging.WARNING, logger="linkwise.build"):
        written = SiteBuilder(config).run()

    assert [path.relative_to(config.output_dir).as_posix() for path in written] == [
        "index.html",
        "raw.html",
        "plugin-manifest.json",
    ]
    assert not (config.output_dir / "raw").exists()
    assert "slug 'raw' is already used by raw.html" in caplog.text
    _published, options = SiteBuilder(config).collect()
    assert options.all_slugs == ("index", "raw")
