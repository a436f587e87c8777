"""Tests for changed-file classification."""

from __future__ import annotations

from pathlib import Path

import pytest

from docdeps.includes.classifier import classify_changes
from docdeps.includes.index import DependencyIndex
from tests._fixtures.repo_builder import RepoBuilder


def test_changed_include_lists_its_includer(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "source/page.rst": ".. include:: /includes/foo.rst\n",
            "source/includes/foo.rst": "Shared\n",
        }
    )

    result = classify_changes(["source/includes/foo.rst"], repo_builder.index(), repo_builder.path())

    assert result.impacted == {"source/includes/foo.rst": ["source/page.rst"]}
    assert result.direct == []


def test_file_without_includers_is_a_direct_change(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"source/other.rst": "Standalone\n"})

    result = classify_changes(["source/other.rst"], repo_builder.index(), repo_builder.path())

    assert result.impacted == {}
    assert result.direct == ["source/other.rst"]


def test_multiple_includers_are_sorted_and_unique(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "source/zeta.rst": ".. include:: /includes/shared.rst\n",
            "source/alpha.rst": ".. include:: /includes/shared.rst\n"
            ".. literalinclude:: includes/shared.rst\n",
        }
    )

    result = classify_changes(["source/includes/shared.rst"], repo_builder.index(), repo_builder.path())

    assert result.impacted == {
        "source/includes/shared.rst": ["source/alpha.rst", "source/zeta.rst"]
    }


def test_includers_outside_root_collapse_into_direct(tmp_path: Path) -> None:
    root = tmp_path / "repo"
    index = DependencyIndex()
    index.add(root / "source/includes/foo.rst", tmp_path / "outside" / "page.rst")
    index.add(root / "source/includes/foo.rst", root)

    result = classify_changes(["source/includes/foo.rst"], index, root)

    assert result.impacted == {}
    assert result.direct == ["source/includes/foo.rst"]


@pytest.mark.parametrize(
    "changed",
    [
        [],
        ["source/includes/a.rst"],
        ["source/includes/a.rst", "source/b.rst", "source/includes/c.rst"],
        ["source/includes/a.rst", "source/includes/a.rst", "source/z.rst"],
    ],
)
def test_classification_partitions_input(changed: list[str], tmp_path: Path) -> None:
    root = tmp_path / "repo"
    index = DependencyIndex()
    index.add(root / "source/includes/a.rst", root / "source/page.rst")
    index.add(root / "source/includes/c.rst", tmp_path / "elsewhere.rst")

    result = classify_changes(changed, index, root)

    impacted = set(result.impacted)
    direct = set(result.direct)
    assert impacted.isdisjoint(direct)
    assert impacted | direct == set(changed)
    assert len(result.impacted) + len(result.direct) == len(set(changed))
    assert result.direct == sorted(result.direct)
    assert list(result.impacted) == sorted(result.impacted)
