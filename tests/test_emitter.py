"""Tests for page, asset, tag-listing and manifest emission."""

from __future__ import annotations

import datetime as dt
import json
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from linkwise.config import ManifestOptions, SiteInfo
from linkwise.content import ContentFile
from linkwise.emitter import ManifestEmitter, PageEmitter, output_path, tag_slug
from linkwise.paths import FilePath, slugify_file_path


def _page(file_path: str, **frontmatter: typ.Any) -> ContentFile:  # noqa: ANN401
    return ContentFile(
        file_path=FilePath(file_path),
        slug=slugify_file_path(file_path),
        source=Path("/content") / file_path,
        frontmatter=frontmatter,
    )


@pytest.fixture
def emitter(tmp_path: Path) -> PageEmitter:
    """Return a page emitter writing into ``tmp_path/public``."""
    return PageEmitter(SiteInfo(name="Field Notes"), tmp_path / "public", stylesheet=".x{}")


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_output_path_appends_extension(tmp_path: Path) -> None:
    """Slugs map directly onto output file names."""
    assert output_path(tmp_path, "notes/index", ".html") == tmp_path / "notes" / "index.html"
    assert output_path(tmp_path, "papers/a.pdf") == tmp_path / "papers" / "a.pdf"


def test_tag_slug_normalizes_tag() -> None:
    """Tag pages live under ``tags/`` with slugified components."""
    assert tag_slug("  status/in progress ") == "tags/status/in-progress"
    assert tag_slug("lang//python/") == "tags/lang/python"


def test_emit_page_writes_template(emitter: PageEmitter) -> None:
    """Pages carry title, breadcrumbs, tag links and content."""
    page = _page("notes/today.md", title="Today", tags=["daily", "lang/python"])
    path = emitter.emit_page(page, "<p>Hello</p>")

    assert path == emitter.output_dir / "notes" / "today.html"
    soup = _soup(path)
    assert soup.title is not None
    assert soup.title.get_text() == "Today | Field Notes"
    assert soup.body is not None
    assert soup.body.get("data-slug") == "notes/today"

    home = soup.select_one('[data-test="breadcrumb-home"]')
    assert home is not None
    assert home.get("href") == "../"
    crumbs = [(a.get_text(), a.get("href")) for a in soup.select('[data-test="breadcrumb"]')]
    assert crumbs == [("notes", "../notes/")]

    tags = [(a.get_text(), a.get("href")) for a in soup.select("a.tag-link")]
    assert tags == [("#daily", "../tags/daily"), ("#lang/python", "../tags/lang/python")]
    assert soup.select_one("article p") is not None
    style = soup.find("style")
    assert style is not None
    assert style.get_text() == ".x{}"


def test_emit_page_for_root_index(emitter: PageEmitter) -> None:
    """The root page links home to its own directory and has no crumbs."""
    soup = _soup(emitter.emit_page(_page("index.md", title="Home"), ""))
    home = soup.select_one('[data-test="breadcrumb-home"]')
    assert home is not None
    assert home.get("href") == "./"
    assert soup.select('[data-test="breadcrumb"]') == []


@pytest.mark.parametrize(
    ("file_path", "expected"),
    [
        ("index.md", "https://notes.example.com/"),
        ("notes/index.md", "https://notes.example.com/notes/"),
        ("notes/today.md", "https://notes.example.com/notes/today"),
    ],
)
def test_emit_page_canonical_url(tmp_path: Path, file_path: str, expected: str) -> None:
    """A configured base URL adds a canonical link for the page."""
    site = SiteInfo(name="Field Notes", base_url="https://notes.example.com")
    emitter = PageEmitter(site, tmp_path / "public")
    soup = _soup(emitter.emit_page(_page(file_path), ""))

    canonical = soup.select_one('link[rel="canonical"]')
    assert canonical is not None
    assert canonical.get("href") == expected


def test_emit_page_without_base_url_has_no_canonical(emitter: PageEmitter) -> None:
    """Without a base URL no canonical link is written."""
    soup = _soup(emitter.emit_page(_page("a.md"), ""))
    assert soup.select_one('link[rel="canonical"]') is None


def test_emit_asset_copies_file(tmp_path: Path, emitter: PageEmitter) -> None:
    """Assets are copied to their slug, keeping the extension."""
    source = tmp_path / "content" / "papers" / "attention.pdf"
    source.parent.mkdir(parents=True)
    source.write_bytes(b"%PDF-1.7")
    asset = ContentFile(
        file_path=FilePath("papers/attention.pdf"),
        slug=slugify_file_path("papers/attention.pdf"),
        source=source,
    )

    destination = emitter.emit_asset(asset)

    assert destination == emitter.output_dir / "papers" / "attention.pdf"
    assert destination.read_bytes() == b"%PDF-1.7"


def test_emit_tag_pages_include_ancestors(emitter: PageEmitter) -> None:
    """Hierarchical tags produce listings for every ancestor tag."""
    pages = [
        _page("notes/a.md", title="A", tags=["lang/python"]),
        _page("b.md", title="B", tags=["lang"]),
    ]

    paths = emitter.emit_tag_pages(pages)

    assert [path.relative_to(emitter.output_dir).as_posix() for path in paths] == [
        "tags/lang.html",
        "tags/lang/python.html",
    ]
    lang = _soup(paths[0])
    entries = [(a.get_text(), a.get("href")) for a in lang.select("a.listing__link")]
    assert entries == [("A", "../notes/a"), ("B", "../b")]
    heading = lang.select_one("h1.page-title")
    assert heading is not None
    assert heading.get_text() == "Tag: lang"


def test_emit_tag_pages_skip_blank_tags(emitter: PageEmitter) -> None:
    """Blank tags never produce a hidden listing file."""
    paths = emitter.emit_tag_pages([_page("a.md", tags=["", "  "]), _page("b.md", tags="/")])

    assert paths == []
    assert not (emitter.output_dir / "tags" / ".html").exists()


def test_manifest_structure() -> None:
    """Metadata keys precede the timestamp and page entries."""
    options = ManifestOptions(metadata={"generator": "linkwise", "version": 1})
    manifest = ManifestEmitter(options, Path("public")).build_manifest(
        [_page("notes/today.md", title="Today", tags=["daily"], draft=False)],
        generated_at=dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.UTC),
    )

    assert list(manifest) == ["generator", "version", "generatedAt", "pages"]
    assert manifest["generatedAt"] == "2024-05-01T12:00:00+00:00"
    assert manifest["pages"] == [
        {
            "slug": "notes/today",
            "title": "Today",
            "tags": ["daily"],
            "filePath": "notes/today.md",
            "frontmatter": {"title": "Today", "tags": ["daily"], "draft": False},
        }
    ]


def test_manifest_can_omit_frontmatter() -> None:
    """Disabling front matter drops the key from page entries."""
    options = ManifestOptions(include_frontmatter=False)
    manifest = ManifestEmitter(options, Path("public")).build_manifest([_page("a.md")])
    assert manifest["pages"] == [
        {"slug": "a", "title": None, "tags": None, "filePath": "a.md"}
    ]


def test_manifest_emit_applies_transform(tmp_path: Path) -> None:
    """The serialized manifest passes through the transform hook."""
    options = ManifestOptions(slug="meta/manifest", transform_manifest=str.upper)
    path = ManifestEmitter(options, tmp_path).emit([_page("a.md", title="a", tags=["x"])])

    assert path == tmp_path / "meta" / "manifest.json"
    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    payload = json.loads(text)
    assert payload["GENERATOR"] == "LINKWISE"
    assert payload["PAGES"][0]["SLUG"] == "A"
