"""Changed-file detection between two revisions."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, List

from ..logging import get_logger


class ChangedFileDetector:
    """Lists files that differ between a base and head revision."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("git.diff")

    def changed_files(self, repo_path: str | Path, base_ref: str, head_ref: str) -> List[str]:
        """Return repo-relative paths changed between the two refs.

        Git failures (bad refs, missing checkout, git not installed) are logged
        and reported as no changes.
        """
        repo = Path(repo_path)
        args = ["git", "diff", "--name-only", base_ref, head_ref]
        try:
            output = self._runner(args, cwd=repo, capture_output=True)
        except (subprocess.CalledProcessError, OSError) as exc:
            self.logger.warning(
                "Could not list changed files between %s and %s: %s", base_ref, head_ref, exc
            )
            return []

        files: List[str] = []
        for line in output.splitlines():
            path = line.strip().replace("\\", "/")
            if path and path not in files:
                files.append(path)
        self.logger.debug("git diff reported %d changed files", len(files))
        return files

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        return completed.stdout if capture_output else ""
