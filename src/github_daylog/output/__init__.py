"""Output formatters for GitHub Daylog."""

from github_daylog.output.console import Console
from github_daylog.output.markdown import MarkdownReport, render_event_line, render_header

__all__ = ["Console", "MarkdownReport", "render_header", "render_event_line"]
