"""Reverse include index: included file -> files that include it."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Collection, Dict, Iterator, Optional, Set

from ..logging import get_logger
from .extractor import extract_include_targets
from .resolver import normalize, resolve_include_target
from .scanner import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS, iter_candidate_files

_LOGGER = get_logger("includes.index")


class DependencyIndex:
    """Maps canonical include targets to the set of files including them."""

    def __init__(self) -> None:
        self._entries: Dict[Path, Set[Path]] = defaultdict(set)

    def add(self, target: Path, includer: Path) -> None:
        self._entries[normalize(target)].add(normalize(includer))

    def includers(self, target: Path) -> Set[Path]:
        entry = self._entries.get(normalize(target))
        return set(entry) if entry else set()

    def targets(self) -> Iterator[Path]:
        return iter(self._entries)

    def as_dict(self) -> Dict[Path, Set[Path]]:
        return {target: set(includers) for target, includers in self._entries.items()}

    def __contains__(self, target: object) -> bool:
        if not isinstance(target, Path):
            return False
        return normalize(target) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def build_dependency_index(
    root: Path,
    source_dir: Path,
    *,
    extensions: Optional[Collection[str]] = DEFAULT_EXTENSIONS,
    exclude_dirs: Collection[str] = DEFAULT_EXCLUDE_DIRS,
) -> DependencyIndex:
    """
    Scan ``root`` and record every include directive in a fresh index.

    Args:
        root: Absolute repository root.
        source_dir: Directory that ``/``-prefixed targets are rooted at.
        extensions: Documentation suffixes to scan.
        exclude_dirs: Directory names to skip.
    """
    root = normalize(root)
    source_dir = normalize(source_dir)
    index = DependencyIndex()
    scanned = 0

    for file_path in iter_candidate_files(
        root, extensions=extensions, exclude_dirs=exclude_dirs
    ):
        scanned += 1
        for target in extract_include_targets(file_path):
            index.add(resolve_include_target(target, file_path, source_dir), file_path)

    _LOGGER.debug("Indexed %d include targets across %d files", len(index), scanned)
    return index


__all__ = ["DependencyIndex", "build_dependency_index"]
