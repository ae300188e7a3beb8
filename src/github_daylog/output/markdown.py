"""Markdown rendering of a day's events."""

import logging
from collections.abc import Iterable
from datetime import date
from typing import TextIO

from github_daylog.exceptions import RecordError
from github_daylog.models.event import EventLink, GitHubEvent
from github_daylog.services.event_classifier import classify_event

logger = logging.getLogger(__name__)


def render_header(target_date: date, label: str = "GitHub activity") -> str:
    """Header line naming the reported day."""
    return f"## {label} for {target_date.isoformat()}"


def render_event_line(link: EventLink, host: str = "https://github.com") -> str:
    """Markdown bullet for one classified event."""
    return f"- {link.event_type} - [{link.repo_name}]({link.url(host)})"


class MarkdownReport:
    """Streams the header and one bullet per event to ``out``."""

    def __init__(
        self,
        out: TextIO,
        host: str = "https://github.com",
        label: str = "GitHub activity",
    ):
        self.out = out
        self.host = host
        self.label = label

    def _emit(self, line: str) -> None:
        self.out.write(line + "\n")

    def write(self, events: Iterable[GitHubEvent], target_date: date) -> int:
        """Write the report for already-filtered ``events``.

        Events that cannot be classified are logged and left out. The header
        is written even when nothing matches.

        Returns:
            Number of event lines written
        """
        self._emit(render_header(target_date, self.label))
        self._emit("")

        written = 0
        for event in events:
            try:
                link = classify_event(event)
            except RecordError as e:
                logger.warning("%s", e)
                continue
            self._emit(render_event_line(link, self.host))
            written += 1

        return written
