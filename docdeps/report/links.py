"""Markdown link formatting for deploy preview pages."""

from __future__ import annotations

import re
from typing import Collection, Optional

DEFAULT_IGNORED_DIRS = frozenset({"includes", "images", "examples"})

_SOURCE_SEGMENT = "source"
_EXTENSION_PATTERN = re.compile(r"\.(?:txt|rst)$")


def create_markdown_link(
    file_rel_path: str,
    base_url: Optional[str] = None,
    *,
    ignored_dirs: Collection[str] = DEFAULT_IGNORED_DIRS,
) -> str:
    """Link a repo-relative source page to its deploy preview URL.

    Paths outside ``source/``, paths under an ignored second-level directory
    and calls without a base URL return ``file_rel_path`` unchanged.
    """
    if not base_url:
        return file_rel_path

    segments = file_rel_path.split("/")
    if len(segments) < 2 or segments[0] != _SOURCE_SEGMENT:
        return file_rel_path
    if segments[1] in ignored_dirs:
        return file_rel_path

    link_path = file_rel_path[len(_SOURCE_SEGMENT) + 1:]
    link_path = _EXTENSION_PATTERN.sub("", link_path)
    if not link_path.startswith("/"):
        link_path = "/" + link_path

    url = re.sub(r"/$", "", base_url) + link_path
    return f"[{file_rel_path}]({url})"


__all__ = ["DEFAULT_IGNORED_DIRS", "create_markdown_link"]
