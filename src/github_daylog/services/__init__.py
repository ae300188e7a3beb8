"""Services for fetching and shaping GitHub events."""

from github_daylog.services.date_filter import filter_events_by_date
from github_daylog.services.event_classifier import classify_event
from github_daylog.services.event_fetcher import EventFetcher
from github_daylog.services.github_rest_client import GitHubRestClient
from github_daylog.services.identity_resolver import IdentityResolver

__all__ = [
    "GitHubRestClient",
    "IdentityResolver",
    "EventFetcher",
    "filter_events_by_date",
    "classify_event",
]
