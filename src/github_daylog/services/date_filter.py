"""Calendar-day filtering of events."""

import logging
from collections.abc import Iterable
from datetime import date

from github_daylog.exceptions import RecordError
from github_daylog.models.event import GitHubEvent

logger = logging.getLogger(__name__)


def filter_events_by_date(events: Iterable[GitHubEvent], target_date: date) -> list[GitHubEvent]:
    """Keep the events created on ``target_date``.

    The day is read in each timestamp's own offset, not converted to UTC or
    local time. Events with a missing or malformed timestamp are skipped.
    Input order is preserved.
    """
    matching = []
    for event in events:
        if event.created_at is None:
            logger.debug("Skipping event %s without created_at", event.id)
            continue
        try:
            created = event.created_datetime()
        except RecordError as e:
            logger.warning("Error parsing event date: %s", e)
            continue
        if created.date() == target_date:
            matching.append(event)

    logger.debug("%d events on %s", len(matching), target_date.isoformat())
    return matching
