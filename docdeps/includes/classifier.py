"""Classification of changed files by downstream include impact."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

from ..models import ClassificationResult
from .index import DependencyIndex
from .resolver import is_strictly_within, normalize, to_relative


def classify_changes(
    changed_files: Iterable[str], index: DependencyIndex, root: Path
) -> ClassificationResult:
    """
    Partition ``changed_files`` into impacted includes and direct changes.

    A changed file is impacted when the index knows at least one includer that
    still lies inside ``root``; every other changed file is a direct change.
    """
    root = normalize(root)
    impacted: Dict[str, List[str]] = {}
    direct: List[str] = []

    for changed in sorted(set(changed_files)):
        location = normalize(root / changed)
        if location not in index:
            direct.append(changed)
            continue
        includers = {
            to_relative(includer, root)
            for includer in index.includers(location)
            if is_strictly_within(includer, root)
        }
        if includers:
            impacted[changed] = sorted(includers)
        else:
            direct.append(changed)

    return ClassificationResult(impacted=impacted, direct=direct)


__all__ = ["classify_changes"]
