"""GitHub Daylog SDK - High-level API for a day's GitHub activity."""

import logging
from datetime import date
from typing import Optional, TextIO

import httpx

from github_daylog.config import Config
from github_daylog.exceptions import GitHubDaylogError
from github_daylog.models.event import GitHubEvent
from github_daylog.output.markdown import MarkdownReport
from github_daylog.services.date_filter import filter_events_by_date
from github_daylog.services.event_fetcher import EventFetcher
from github_daylog.services.github_rest_client import GitHubRestClient
from github_daylog.services.identity_resolver import IdentityResolver

logger = logging.getLogger(__name__)


class GitHubDaylog:
    """High-level SDK for reporting one day of the token owner's activity.

    The pipeline is strictly sequential: resolve the login, fetch its events,
    keep the ones on the target day, render them.

    Example usage:
        ```python
        from github_daylog import Config, GitHubDaylog

        async with GitHubDaylog(Config(github_token="ghp_xxx")) as client:
            await client.write_report(date(2024, 5, 1), sys.stdout)
        ```

    Args:
        config: Token, API and link hosts, timeout.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config
        self._transport = transport
        self._rest_client: GitHubRestClient | None = None
        self._initialized = False

    async def __aenter__(self) -> "GitHubDaylog":
        """Async context manager entry."""
        self._rest_client = GitHubRestClient(config=self._config, transport=self._transport)
        self._initialized = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP connection."""
        if self._rest_client:
            await self._rest_client.close()
        self._initialized = False

    def _ensure_initialized(self) -> GitHubRestClient:
        if not self._initialized or self._rest_client is None:
            raise GitHubDaylogError(
                "Client not initialized. Use 'async with GitHubDaylog(...) as client:'"
            )
        return self._rest_client

    async def resolve_identity(self) -> str:
        """Login of the token's owner.

        Raises:
            IdentityResolutionError: If the login cannot be determined
        """
        rest_client = self._ensure_initialized()
        return await IdentityResolver(rest_client).resolve()

    async def fetch_events(self, username: str) -> list[GitHubEvent]:
        """First page of ``username``'s events, newest first.

        Raises:
            FetchError: If the feed cannot be fetched or decoded
        """
        rest_client = self._ensure_initialized()
        return await EventFetcher(rest_client).fetch_events(username)

    async def events_for_date(self, target_date: date) -> list[GitHubEvent]:
        """The token owner's events created on ``target_date``."""
        username = await self.resolve_identity()
        events = await self.fetch_events(username)
        return filter_events_by_date(events, target_date)

    async def write_report(self, target_date: date, out: TextIO) -> int:
        """Run the whole pipeline and stream the markdown report to ``out``.

        Nothing is written if resolving or fetching fails.

        Returns:
            Number of event lines written
        """
        events = await self.events_for_date(target_date)
        report = MarkdownReport(
            out,
            host=self._config.web_host,
            label=self._config.report_label,
        )
        written = report.write(events, target_date)
        logger.info("Reported %d of %d events", written, len(events))
        return written
