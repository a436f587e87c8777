"""Extraction of include directive targets from documentation files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ..logging import get_logger

INCLUDE_MARKERS = (".. include::", ".. literalinclude::")

_LOGGER = get_logger("includes.extractor")


def parse_include_line(line: str) -> Optional[str]:
    """Return the raw target of an include directive line, or None."""
    stripped = line.strip()
    if not stripped.startswith(INCLUDE_MARKERS):
        return None
    _, separator, remainder = stripped.partition("::")
    if not separator:
        return None
    target = remainder.strip()
    return target or None


def extract_include_targets(path: Path) -> List[str]:
    """Return the include targets found in ``path`` in file order."""
    if not path.is_file():
        return []
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.warning("Could not read %s: %s", path, exc)
        return []

    targets: List[str] = []
    for line in text.splitlines():
        target = parse_include_line(line)
        if target is not None:
            targets.append(target)
    return targets


__all__ = ["INCLUDE_MARKERS", "extract_include_targets", "parse_include_line"]
