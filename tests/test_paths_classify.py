"""Tests for the path category predicates and branded constructors."""

from __future__ import annotations

import pytest

from linkwise.paths import (
    InvalidPathError,
    as_file_path,
    as_full_slug,
    as_relative_url,
    as_simple_slug,
    is_absolute_url,
    is_file_path,
    is_full_slug,
    is_relative_url,
    is_simple_slug,
)

CANDIDATES = [
    "",
    ".",
    "./",
    "../",
    "./page",
    "../notes/",
    "page",
    "notes/index",
    "notes/",
    "/",
    "/notes",
    "notes/page.md",
    "papers/attention.pdf",
    "./papers/attention.pdf",
    ".hidden",
    "a b",
]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("notes/page.md", True),
        ("papers/attention.pdf", True),
        ("notes/page", False),
        ("./notes/page.md", False),
    ],
)
def test_is_file_path(value: str, expected: bool) -> None:  # noqa: FBT001
    """File paths need an extension and may not start with a dot."""
    assert is_file_path(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("notes/page", True),
        ("notes/index", True),
        ("index", True),
        ("papers/attention.pdf", True),
        ("/notes/page", False),
        ("./notes/page", False),
        ("notes/", False),
        ("notes/my page", False),
        ("notes/page#anchor", False),
        ("notes/what?", False),
        ("R&D", False),
    ],
)
def test_is_full_slug(value: str, expected: bool) -> None:  # noqa: FBT001
    """Full slugs reject boundary slashes, leading dots and reserved characters."""
    assert is_full_slug(value) is expected, f"is_full_slug({value!r}) should be {expected}"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("/", True),
        ("notes/", True),
        ("notes/page", True),
        ("/notes", False),
        ("notes/index", False),
        ("index", False),
        ("notes/page.md", False),
        ("./notes", False),
    ],
)
def test_is_simple_slug(value: str, expected: bool) -> None:  # noqa: FBT001
    """Only the root may start with a slash; index segments are never simple."""
    assert is_simple_slug(value) is expected, f"is_simple_slug({value!r}) should be {expected}"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("./page", True),
        ("../notes/", True),
        (".", True),
        ("./papers/attention.pdf", True),
        ("page", False),
        ("./index", False),
        ("../notes/index", False),
        ("./page.md", False),
        ("./page.html", False),
    ],
)
def test_is_relative_url(value: str, expected: bool) -> None:  # noqa: FBT001
    """Relative URLs start with a dot and carry no index or markup suffix."""
    assert is_relative_url(value) is expected, f"is_relative_url({value!r}) should be {expected}"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://example.com/page", True),
        ("http://localhost:8000/", True),
        ("mailto:someone@example.com", True),
        ("https://", False),
        ("http://[::1", False),
        ("../notes/page", False),
        ("notes/page", False),
        ("/notes/page", False),
        ("#anchor", False),
    ],
)
def test_is_absolute_url(value: str, expected: bool) -> None:  # noqa: FBT001
    """Absolute URLs need a scheme, and web schemes also need a host."""
    assert is_absolute_url(value) is expected, f"is_absolute_url({value!r}) should be {expected}"


@pytest.mark.parametrize("value", CANDIDATES)
def test_full_slugs_and_relative_urls_are_disjoint(value: str) -> None:
    """No string is both a full slug and a relative URL."""
    assert not (is_full_slug(value) and is_relative_url(value)), (
        f"{value!r} classified as both full slug and relative URL"
    )


def test_branding_returns_the_original_string() -> None:
    """Valid input passes through the constructors unchanged."""
    assert as_file_path("notes/page.md") == "notes/page.md"
    assert as_full_slug("notes/index") == "notes/index"
    assert as_simple_slug("notes/") == "notes/"
    assert as_relative_url("../notes/") == "../notes/"


@pytest.mark.parametrize(
    ("constructor", "value"),
    [
        (as_file_path, "notes/page"),
        (as_full_slug, "./notes/page"),
        (as_simple_slug, "notes/index"),
        (as_relative_url, "notes/page"),
    ],
)
def test_branding_rejects_invalid_input(constructor, value: str) -> None:  # noqa: ANN001
    """Constructors raise InvalidPathError naming the rejected value."""
    with pytest.raises(InvalidPathError, match="is not a valid"):
        constructor(value)


def test_invalid_path_error_is_a_value_error() -> None:
    """Callers catching ValueError also see path validation failures."""
    assert issubclass(InvalidPathError, ValueError)
