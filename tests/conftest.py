"""Shared fixtures building a small content tree for pipeline tests."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from linkwise.config import SiteConfig

SITE_FILES: dict[str, str] = {
    "index.md": """\
        ---
        title: Home
        tags: [guides]
        ---
        See [setup](Setup.md) and [the notes](notes/).
        """,
    "guides/Setup.md": """\
        ---
        title: Setup
        tags: [guides/install]
        ---
        # Install Steps

        Go [home](/) or read [today](today.md#Morning%20Plan).
        """,
    "notes/index.md": """\
        # Notes

        Read [today](today.md) and [the ghost](ghost.md).
        """,
    "notes/today.md": """\
        ---
        title: Today
        ---
        ## Morning Plan

        ![diagram](images/diagram.png)
        """,
    "notes/secret.md": """\
        ---
        tags: [private]
        ---
        Hidden.
        """,
    "_drafts/wip.md": "Work in progress.\n",
}


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Write the sample site under ``tmp_path/content`` and return ``tmp_path``."""
    content_dir = tmp_path / "content"
    for relative, body in SITE_FILES.items():
        path = content_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(body), encoding="utf-8")
    image = content_dir / "images" / "diagram.png"
    image.parent.mkdir(parents=True, exist_ok=True)
    image.write_bytes(b"\x89PNG\r\n")
    return tmp_path


@pytest.fixture
def site_config(site_root: Path) -> SiteConfig:
    """Return a default configuration pointing at the sample site."""
    return SiteConfig(content_dir=site_root / "content", output_dir=site_root / "public")
