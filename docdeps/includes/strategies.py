"""Addressing strategies used to classify changed documentation files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from ..config import MODE_INDEX, MODE_SUBSTRING, CheckConfig, ConfigError
from ..logging import get_logger
from ..models import ClassificationResult
from .classifier import classify_changes
from .extractor import INCLUDE_MARKERS
from .index import DependencyIndex, build_dependency_index
from .resolver import normalize, to_relative
from .scanner import content_skip_rule, iter_candidate_files

_LOGGER = get_logger("includes.strategies")


class ImpactStrategy(ABC):
    """Contract for the ways changed files are matched to their includers."""

    def __init__(self, root: Path, config: CheckConfig) -> None:
        self.root = normalize(root)
        self.config = config

    def relevant(self, changed_files: Iterable[str]) -> List[str]:
        """Return the changed files this strategy should classify."""
        return list(changed_files)

    @abstractmethod
    def classify(self, changed_files: Iterable[str]) -> ClassificationResult:
        """Partition ``changed_files`` into impacted includes and direct changes."""


class IndexStrategy(ImpactStrategy):
    """Builds the reverse include index and classifies against it.

    The index is built once and shared by ``relevant`` and ``classify``, so a
    changed file of any extension is relevant when some page includes it.
    """

    def __init__(self, root: Path, config: CheckConfig) -> None:
        super().__init__(root, config)
        self._index: Optional[DependencyIndex] = None

    @property
    def index(self) -> DependencyIndex:
        if self._index is None:
            self._index = build_dependency_index(
                self.root,
                self.root / self.config.source_dir,
                extensions=self.config.extensions,
                exclude_dirs=self.config.exclude_dirs,
            )
        return self._index

    def relevant(self, changed_files: Iterable[str]) -> List[str]:
        suffixes = tuple(suffix.lower() for suffix in self.config.extensions)
        return [
            path
            for path in changed_files
            if path.lower().endswith(suffixes) or normalize(self.root / path) in self.index
        ]

    def classify(self, changed_files: Iterable[str]) -> ClassificationResult:
        return classify_changes(changed_files, self.index, self.root)


class SubstringStrategy(ImpactStrategy):
    """
    Matches literal ``/includes/...`` directives in file contents.

    Only changed files under the includes folder are looked up. Every scanned
    file is read once and tested against all of their directive strings.
    """

    def classify(self, changed_files: Iterable[str]) -> ClassificationResult:
        changed = sorted(set(changed_files))
        needles: Dict[str, List[str]] = {}
        for changed_file in changed:
            include_path = self._include_path(changed_file)
            if include_path is not None:
                needles[changed_file] = [f"{marker} /{include_path}" for marker in INCLUDE_MARKERS]

        matches: Dict[str, Set[str]] = defaultdict(set)
        if needles:
            skip = content_skip_rule(self.config.skip_prefixes, self.config.skip_suffixes)
            for file_path in iter_candidate_files(
                self.root,
                extensions=None,
                exclude_dirs=self.config.exclude_dirs,
                skip=skip,
            ):
                content = _read_text(file_path)
                if content is None:
                    continue
                for changed_file, patterns in needles.items():
                    if any(pattern in content for pattern in patterns):
                        _LOGGER.debug("Found include of %s in %s", changed_file, file_path)
                        matches[changed_file].add(to_relative(file_path, self.root))

        impacted = {path: sorted(matches[path]) for path in changed if matches.get(path)}
        direct = [path for path in changed if path not in impacted]
        return ClassificationResult(impacted=impacted, direct=direct)

    def _include_path(self, changed_file: str) -> Optional[str]:
        source_prefix = f"{self.config.source_dir.strip('/')}/"
        stripped = changed_file
        if stripped.startswith(source_prefix):
            stripped = stripped[len(source_prefix):]
        if stripped.startswith(f"{self.config.includes_dir.strip('/')}/"):
            return stripped
        return None


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.debug("Skipping %s: %s", path, exc)
        return None


_STRATEGIES = {
    MODE_INDEX: IndexStrategy,
    MODE_SUBSTRING: SubstringStrategy,
}


def create_strategy(root: Path, config: CheckConfig) -> ImpactStrategy:
    """Return the strategy registered for ``config.mode``."""
    try:
        strategy_cls = _STRATEGIES[config.mode]
    except KeyError:
        raise ConfigError(f"Unknown addressing mode: {config.mode!r}") from None
    return strategy_cls(root, config)


__all__ = [
    "ImpactStrategy",
    "IndexStrategy",
    "SubstringStrategy",
    "create_strategy",
]
