"""Core data models shared across docdeps components."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ClassificationResult:
    """Partition of changed files into impacted includes and direct changes."""

    impacted: Dict[str, List[str]] = field(default_factory=dict)
    direct: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.impacted) + len(self.direct)


@dataclass(frozen=True)
class StatusUpdate:
    """Structured status shown by the host build pipeline."""

    title: str
    summary: str
    text: str
