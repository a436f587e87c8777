"""Tests for deploy preview link formatting."""

from __future__ import annotations

import pytest

from docdeps.report.links import create_markdown_link


def test_no_base_url_returns_path_unchanged() -> None:
    assert create_markdown_link("source/page.txt") == "source/page.txt"
    assert create_markdown_link("source/page.txt", "") == "source/page.txt"


def test_source_page_is_linked() -> None:
    assert (
        create_markdown_link("source/page.txt", "https://x.test/")
        == "[source/page.txt](https://x.test/page)"
    )


def test_nested_rst_page_is_linked_without_extension() -> None:
    assert (
        create_markdown_link("source/guide/install.rst", "https://x.test")
        == "[source/guide/install.rst](https://x.test/guide/install)"
    )


@pytest.mark.parametrize(
    "path",
    [
        "source/includes/foo.rst",
        "source/images/diagram.txt",
        "source/examples/sample.rst",
        "config/redirects.txt",
        "source",
        "README.rst",
    ],
)
def test_paths_outside_linkable_pages_are_unchanged(path: str) -> None:
    assert create_markdown_link(path, "https://x.test/") == path


def test_only_one_trailing_extension_is_stripped() -> None:
    assert (
        create_markdown_link("source/archive.txt.rst", "https://x.test/")
        == "[source/archive.txt.rst](https://x.test/archive.txt)"
    )


def test_custom_ignored_directories() -> None:
    assert (
        create_markdown_link("source/includes/foo.rst", "https://x.test/", ignored_dirs=())
        == "[source/includes/foo.rst](https://x.test/includes/foo)"
    )
