"""Events feed fetcher service."""

import logging

from github_daylog.exceptions import FetchError, GitHubAPIError
from github_daylog.models.event import GitHubEvent
from github_daylog.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class EventFetcher:
    """Fetches a user's events feed."""

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    async def fetch_events(self, username: str) -> list[GitHubEvent]:
        """Fetch the first page of the user's events, newest first.

        Only one page is read, so activity past the API's default page size
        (or its ~90 day / 300 event retention) is never seen.

        Args:
            username: GitHub login

        Returns:
            Events in the order the API returned them

        Raises:
            FetchError: If the request fails or the body is not a list of objects
        """
        logger.debug("Fetching events for %s", username)

        try:
            events_data = await self.rest_client.get_user_events(username)
        except GitHubAPIError as e:
            raise FetchError(f"Could not fetch events for {username}: {e}", cause=e) from e

        if not isinstance(events_data, list):
            raise FetchError(
                f"Unexpected events response: expected a list, got {type(events_data).__name__}"
            )
        if not all(isinstance(e, dict) for e in events_data):
            raise FetchError("Unexpected events response: every event must be an object")

        events = [GitHubEvent.from_api(e) for e in events_data]

        logger.debug("Found %d events", len(events))

        return events
