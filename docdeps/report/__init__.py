"""Report formatting and delivery."""

from .links import create_markdown_link
from .renderer import REPORT_TITLE, ReportRenderer
from .sinks import CollectingStatusSink, LoggingStatusSink, StatusSink, StreamStatusSink

__all__ = [
    "CollectingStatusSink",
    "LoggingStatusSink",
    "REPORT_TITLE",
    "ReportRenderer",
    "StatusSink",
    "StreamStatusSink",
    "create_markdown_link",
]
