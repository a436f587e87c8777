"""Include dependency resolution for documentation trees."""

from .classifier import classify_changes
from .extractor import extract_include_targets
from .index import DependencyIndex, build_dependency_index
from .resolver import resolve_include_target
from .scanner import iter_candidate_files
from .strategies import ImpactStrategy, IndexStrategy, SubstringStrategy, create_strategy

__all__ = [
    "DependencyIndex",
    "ImpactStrategy",
    "IndexStrategy",
    "SubstringStrategy",
    "build_dependency_index",
    "classify_changes",
    "create_strategy",
    "extract_include_targets",
    "iter_candidate_files",
    "resolve_include_target",
]
