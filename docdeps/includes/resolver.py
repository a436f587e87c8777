"""Path resolution for include directive targets."""

from __future__ import annotations

import os
from pathlib import Path


def normalize(path: Path | str) -> Path:
    """Collapse ``.``/``..`` segments without touching the filesystem."""
    return Path(os.path.normpath(str(path)))


def resolve_include_target(target: str, includer: Path, source_dir: Path) -> Path:
    """
    Map a raw include target to a canonical absolute location.

    Targets starting with ``/`` are rooted at ``source_dir``; anything else is
    relative to the directory holding ``includer``. Resolution is lexical, so a
    target that does not exist still resolves.
    """
    if target.startswith("/"):
        return normalize(source_dir / target.lstrip("/"))
    return normalize(includer.parent / target)


def is_strictly_within(path: Path, root: Path) -> bool:
    """Return True when ``path`` lies below ``root`` (``root`` itself excluded)."""
    if path == root:
        return False
    try:
        path.relative_to(root)
    except ValueError:
        return False
    return True


def to_relative(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` in POSIX form."""
    return path.relative_to(root).as_posix()


__all__ = ["is_strictly_within", "normalize", "resolve_include_target", "to_relative"]
