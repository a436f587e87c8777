"""Version-control helpers."""

from .diff import ChangedFileDetector

__all__ = ["ChangedFileDetector"]
