"""Tests for include directive extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from docdeps.includes.extractor import extract_include_targets, parse_include_line
from tests._fixtures.repo_builder import RepoBuilder


def test_extracts_include_and_literalinclude_in_order(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "source/page.rst": """
            Title
            =====

            .. include:: /includes/intro.rst

               .. literalinclude::   examples/code.py
            Some text mentioning .. include:: inline
            .. include:: ../shared/footer.txt
            """
        }
    )

    targets = extract_include_targets(repo_builder.path("source/page.rst"))

    assert targets == ["/includes/intro.rst", "examples/code.py", "../shared/footer.txt"]


@pytest.mark.parametrize(
    "line",
    [
        ".. include::",
        ".. include::    ",
        ".. literalinclude::",
        ".. image:: /images/logo.png",
        "plain text",
    ],
)
def test_malformed_or_unrelated_lines_are_skipped(line: str) -> None:
    assert parse_include_line(line) is None


def test_parse_include_line_trims_target() -> None:
    assert parse_include_line("   .. include::  /includes/a.rst  ") == "/includes/a.rst"


def test_missing_file_returns_empty(tmp_path: Path) -> None:
    assert extract_include_targets(tmp_path / "missing.rst") == []


def test_directory_returns_empty(tmp_path: Path) -> None:
    assert extract_include_targets(tmp_path) == []


def test_undecodable_file_returns_empty(repo_builder: RepoBuilder) -> None:
    path = repo_builder.write_bytes("source/binary.txt", b"\xff\xfe\x00.. include:: /x.rst")
    assert extract_include_targets(path) == []
