"""Destinations for status updates produced by a run."""

from __future__ import annotations

import sys
from typing import List, Protocol, TextIO

from ..logging import get_logger
from ..models import StatusUpdate


class StatusSink(Protocol):
    """Receives the status update for display in the host pipeline."""

    def show(self, update: StatusUpdate) -> None:
        ...


class LoggingStatusSink:
    """Writes status updates to the docdeps logger."""

    def __init__(self) -> None:
        self.logger = get_logger("report")

    def show(self, update: StatusUpdate) -> None:
        self.logger.info("%s: %s", update.title, update.summary)
        for line in update.text.splitlines():
            self.logger.info("%s", line)


class StreamStatusSink:
    """Prints status updates as plain text."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def show(self, update: StatusUpdate) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{update.title}\n{update.summary}\n\n{update.text}\n")


class CollectingStatusSink:
    """Keeps status updates in memory."""

    def __init__(self) -> None:
        self.updates: List[StatusUpdate] = []

    def show(self, update: StatusUpdate) -> None:
        self.updates.append(update)


__all__ = ["CollectingStatusSink", "LoggingStatusSink", "StatusSink", "StreamStatusSink"]
