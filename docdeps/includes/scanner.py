"""Lazy discovery of documentation files under a repository root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Collection, Iterator, Optional

from ..logging import get_logger

DEFAULT_EXTENSIONS = frozenset({".rst", ".txt"})
DEFAULT_EXCLUDE_DIRS = frozenset({".git", "node_modules"})

_LOGGER = get_logger("includes.scanner")


def iter_candidate_files(
    root: Path,
    *,
    extensions: Optional[Collection[str]] = DEFAULT_EXTENSIONS,
    exclude_dirs: Collection[str] = DEFAULT_EXCLUDE_DIRS,
    skip: Optional[Callable[[Path], bool]] = None,
) -> Iterator[Path]:
    """
    Yield regular files below ``root``, depth first.

    Args:
        root: Absolute directory to walk.
        extensions: Suffixes to keep (compared lower-cased). ``None`` keeps
            every regular file and leaves filtering to ``skip``.
        exclude_dirs: Directory names that are never entered.
        skip: Optional predicate; files for which it returns True are dropped.

    Each call starts a fresh traversal. Directories that cannot be listed are
    logged and skipped.
    """
    suffixes = {suffix.lower() for suffix in extensions} if extensions is not None else None
    excluded = set(exclude_dirs)

    def _walk(current: Path) -> Iterator[Path]:
        try:
            with os.scandir(current) as iterator:
                entries = list(iterator)
        except OSError as exc:
            _LOGGER.warning("Skipping unreadable directory %s: %s", current, exc)
            return

        for entry in entries:
            path = current / entry.name
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file()
            except OSError as exc:
                _LOGGER.warning("Skipping unreadable entry %s: %s", path, exc)
                continue
            if is_dir:
                if entry.name in excluded:
                    continue
                yield from _walk(path)
            elif is_file:
                if suffixes is not None and path.suffix.lower() not in suffixes:
                    continue
                if skip is not None and skip(path):
                    continue
                yield path

    yield from _walk(root)


def content_skip_rule(
    prefixes: Collection[str], suffixes: Collection[str]
) -> Callable[[Path], bool]:
    """Build a predicate dropping files by name prefix or suffix."""
    prefix_tuple = tuple(prefixes)
    suffix_tuple = tuple(suffixes)

    def _skip(path: Path) -> bool:
        if prefix_tuple and path.name.startswith(prefix_tuple):
            return True
        return bool(suffix_tuple) and path.name.endswith(suffix_tuple)

    return _skip


__all__ = [
    "DEFAULT_EXCLUDE_DIRS",
    "DEFAULT_EXTENSIONS",
    "content_skip_rule",
    "iter_candidate_files",
]
