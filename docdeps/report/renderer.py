"""Renders classification results into host status updates."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Collection, Optional

from jinja2 import Environment, FileSystemLoader

from ..models import ClassificationResult, StatusUpdate
from .links import DEFAULT_IGNORED_DIRS, create_markdown_link

REPORT_TITLE = "Documentation Include Dependency Check"


class ReportRenderer:
    """Formats impact reports with Jinja templates."""

    TEMPLATE_NAME = "report.md.j2"

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        ignored_link_dirs: Collection[str] = DEFAULT_IGNORED_DIRS,
    ) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self.ignored_link_dirs = frozenset(ignored_link_dirs)
        self._env = self._create_env(self.templates_dir)

    def render(
        self, result: ClassificationResult, *, base_url: Optional[str] = None
    ) -> StatusUpdate:
        """Return the status update describing ``result``."""
        template = self._env.get_template(self.TEMPLATE_NAME)
        text = template.render(
            impacted=sorted(result.impacted.items()),
            direct=sorted(result.direct),
            link=partial(
                create_markdown_link,
                base_url=base_url,
                ignored_dirs=self.ignored_link_dirs,
            ),
        )
        summary = (
            f"Processed include dependencies for {result.total} changed file(s): "
            f"{len(result.impacted)} with downstream impact, {len(result.direct)} direct."
        )
        return StatusUpdate(title=REPORT_TITLE, summary=summary, text=text.rstrip("\n"))

    def no_changes(self, base_ref: Optional[str], head_ref: Optional[str]) -> StatusUpdate:
        """Return the update for a run with nothing to classify."""
        if base_ref and head_ref:
            text = f"No relevant file changes were found between {base_ref} and {head_ref}."
        else:
            text = "No relevant file changes were found."
        return StatusUpdate(
            title=REPORT_TITLE,
            summary="No relevant file changes detected.",
            text=text,
        )

    @staticmethod
    def _create_env(templates_dir: Path) -> Environment:
        default_dir = Path(__file__).with_name("templates")
        directories = [str(templates_dir)]
        if templates_dir != default_dir:
            directories.append(str(default_dir))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["REPORT_TITLE", "ReportRenderer"]
