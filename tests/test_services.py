"""Tests for identity resolution, event fetching, date filtering and classification."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from github_daylog.exceptions import (
    AuthenticationError,
    FetchError,
    GitHubAPIError,
    IdentityResolutionError,
    RecordError,
)
from github_daylog.models.event import (
    GitHubEvent,
    IssueCommentLink,
    IssueLink,
    PullRequestLink,
    RepositoryLink,
)
from github_daylog.services.date_filter import filter_events_by_date
from github_daylog.services.event_classifier import classify_event
from github_daylog.services.event_fetcher import EventFetcher
from github_daylog.services.identity_resolver import IdentityResolver


def _rest_client(**methods) -> MagicMock:
    client = MagicMock()
    for name, value in methods.items():
        if isinstance(value, Exception):
            setattr(client, name, AsyncMock(side_effect=value))
        else:
            setattr(client, name, AsyncMock(return_value=value))
    return client


class TestIdentityResolver:
    """Tests for IdentityResolver."""

    @pytest.mark.asyncio
    async def test_resolve_success(self):
        """Test that the login is returned."""
        client = _rest_client(get_authenticated_user={"login": "octocat", "id": 1})

        assert await IdentityResolver(client).resolve() == "octocat"
        client.get_authenticated_user.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_api_error_wrapped(self):
        """Test that API errors become IdentityResolutionError with the cause attached."""
        cause = AuthenticationError("Bad credentials: Bad credentials")
        client = _rest_client(get_authenticated_user=cause)

        with pytest.raises(IdentityResolutionError) as exc_info:
            await IdentityResolver(client).resolve()

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"id": 1},
            {"login": 42},
            {"login": ""},
            ["octocat"],
            "octocat",
        ],
    )
    async def test_unusable_login(self, body):
        """Test that a missing or wrong-typed login raises IdentityResolutionError."""
        client = _rest_client(get_authenticated_user=body)

        with pytest.raises(IdentityResolutionError):
            await IdentityResolver(client).resolve()


class TestEventFetcher:
    """Tests for EventFetcher."""

    @pytest.mark.asyncio
    async def test_fetch_preserves_order(self, event_factory):
        """Test that events are decoded in API order."""
        data = [
            event_factory(event_id="3", created_at="2024-05-03T00:00:00Z"),
            event_factory(event_id="2", created_at="2024-05-02T00:00:00Z"),
            event_factory(event_id="1", created_at="2024-05-01T00:00:00Z"),
        ]
        client = _rest_client(get_user_events=data)

        events = await EventFetcher(client).fetch_events("octocat")

        assert [e.id for e in events] == ["3", "2", "1"]
        client.get_user_events.assert_awaited_once_with("octocat")

    @pytest.mark.asyncio
    async def test_fetch_empty(self):
        """Test an empty feed."""
        client = _rest_client(get_user_events=[])
        assert await EventFetcher(client).fetch_events("octocat") == []

    @pytest.mark.asyncio
    async def test_api_error_wrapped(self):
        """Test that API errors become FetchError."""
        cause = GitHubAPIError("Server error: 502", status_code=502)
        client = _rest_client(get_user_events=cause)

        with pytest.raises(FetchError) as exc_info:
            await EventFetcher(client).fetch_events("octocat")

        assert exc_info.value.cause is cause

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"message": "Not Found"}, [1, 2], "events"])
    async def test_malformed_body(self, body):
        """Test that a body that is not a list of objects raises FetchError."""
        client = _rest_client(get_user_events=body)

        with pytest.raises(FetchError):
            await EventFetcher(client).fetch_events("octocat")


class TestFilterEventsByDate:
    """Tests for filter_events_by_date."""

    def _events(self, event_factory, *stamps):
        return [
            GitHubEvent.from_api(event_factory(event_id=str(i), created_at=stamp))
            for i, stamp in enumerate(stamps)
        ]

    def test_keeps_only_target_day_in_order(self, event_factory):
        """Test that exactly the events on the day are kept, in order."""
        events = self._events(
            event_factory,
            "2024-05-02T09:00:00Z",
            "2024-05-01T22:00:00Z",
            "2024-05-01T08:00:00Z",
            "2024-04-30T23:59:59Z",
            "2024-05-01T01:00:00Z",
        )

        result = filter_events_by_date(events, date(2024, 5, 1))

        assert [e.id for e in result] == ["1", "2", "4"]

    def test_uses_encoded_offset(self, event_factory):
        """Test that the day is read in the timestamp's own offset."""
        events = self._events(
            event_factory,
            "2024-05-01T23:30:00-07:00",  # 2024-05-02 in UTC
            "2024-05-02T01:00:00+09:00",  # 2024-05-01 in UTC
        )

        assert [e.id for e in filter_events_by_date(events, date(2024, 5, 1))] == ["0"]
        assert [e.id for e in filter_events_by_date(events, date(2024, 5, 2))] == ["1"]

    def test_same_day_other_month_or_year_excluded(self, event_factory):
        """Test that the whole date must match, not only the day of month."""
        events = self._events(
            event_factory,
            "2024-06-01T10:00:00Z",
            "2023-05-01T10:00:00Z",
        )
        assert filter_events_by_date(events, date(2024, 5, 1)) == []

    def test_bad_timestamps_skipped(self, event_factory, caplog):
        """Test that malformed and missing timestamps are skipped, not fatal."""
        events = self._events(
            event_factory,
            "not-a-date",
            None,
            "2024-05-01T10:00:00Z",
        )

        with caplog.at_level("WARNING"):
            result = filter_events_by_date(events, date(2024, 5, 1))

        assert [e.id for e in result] == ["2"]
        assert "Error parsing event date" in caplog.text

    def test_no_matches(self, event_factory):
        """Test that no matching events yields an empty list."""
        events = self._events(event_factory, "2024-05-02T09:00:00Z")
        assert filter_events_by_date(events, date(2024, 5, 1)) == []


class TestClassifyEvent:
    """Tests for classify_event."""

    def _classify(self, event_factory, **kwargs):
        return classify_event(GitHubEvent.from_api(event_factory(**kwargs)))

    def test_pull_request(self, event_factory):
        """Test pull request events link to the PR."""
        link = self._classify(
            event_factory,
            event_type="PullRequestEvent",
            payload={"action": "opened", "pull_request": {"number": 42}},
        )

        assert isinstance(link, PullRequestLink)
        assert link.url() == "https://github.com/acme/widgets/pull/42"

    def test_pull_request_float_number(self, event_factory):
        """Test that integer-valued floats are accepted."""
        link = self._classify(
            event_factory,
            event_type="PullRequestEvent",
            payload={"pull_request": {"number": 42.0}},
        )
        assert link.url() == "https://github.com/acme/widgets/pull/42"

    def test_issue(self, event_factory):
        """Test issue events link to the issue."""
        link = self._classify(
            event_factory,
            event_type="IssuesEvent",
            payload={"issue": {"number": 3}},
        )

        assert isinstance(link, IssueLink)
        assert link.url() == "https://github.com/acme/widgets/issues/3"

    def test_issue_comment_prefers_issue(self, event_factory):
        """Test that the issue branch wins when both issue and PR are present."""
        link = self._classify(
            event_factory,
            event_type="IssueCommentEvent",
            payload={
                "issue": {"number": 7},
                "pull_request": {"number": 8},
                "comment": {"id": 99},
            },
        )

        assert isinstance(link, IssueCommentLink)
        assert link.url() == "https://github.com/acme/widgets/issues/7#issuecomment-99"

    def test_issue_comment_on_pull_request(self, event_factory):
        """Test comment links fall back to the pull request."""
        link = self._classify(
            event_factory,
            event_type="IssueCommentEvent",
            payload={"pull_request": {"number": 8}, "comment": {"id": 99}},
        )
        assert link.url() == "https://github.com/acme/widgets/pull/8#issuecomment-99"

    @pytest.mark.parametrize("event_type", ["WatchEvent", "PushEvent", "SomethingNewEvent"])
    def test_other_types_link_to_repo(self, event_factory, event_type):
        """Test that other event types link to the repository."""
        link = self._classify(event_factory, event_type=event_type)

        assert isinstance(link, RepositoryLink)
        assert link.url() == "https://github.com/acme/widgets"

    @pytest.mark.parametrize(
        "event_type, payload, message",
        [
            ("PullRequestEvent", {}, "PR number"),
            ("PullRequestEvent", {"pull_request": {"number": "42"}}, "PR number"),
            ("PullRequestEvent", {"pull_request": {"number": 4.5}}, "PR number"),
            ("IssuesEvent", {"issue": {}}, "issue number"),
            ("IssuesEvent", {"issue": None}, "issue number"),
            ("IssueCommentEvent", {"issue": {"number": 7}}, "comment ID"),
            ("IssueCommentEvent", {"comment": {"id": 99}}, "issue or PR"),
            ("IssueCommentEvent", {"issue": {}, "comment": {"id": 99}}, "issue number"),
            (
                "IssueCommentEvent",
                {"pull_request": {"number": True}, "comment": {"id": 99}},
                "PR number",
            ),
        ],
    )
    def test_missing_payload_fields(self, event_factory, event_type, payload, message):
        """Test that missing or wrong-typed payload fields raise RecordError."""
        with pytest.raises(RecordError, match=message):
            self._classify(event_factory, event_type=event_type, payload=payload)

    def test_missing_repo_name(self):
        """Test that an event without a repo name raises RecordError."""
        event = GitHubEvent.from_api({"id": "1", "type": "PushEvent", "repo": {}})
        with pytest.raises(RecordError, match="repo name"):
            classify_event(event)

    def test_missing_type(self):
        """Test that an event without a type raises RecordError."""
        event = GitHubEvent.from_api({"id": "1", "repo": {"name": "acme/widgets"}})
        with pytest.raises(RecordError, match="event type"):
            classify_event(event)

    @pytest.mark.parametrize(
        "payload, reason",
        [
            ({}, "missing or not an object"),
            ({"pull_request": {}}, "number is missing"),
            ({"pull_request": {"number": "42"}}, "number is not an integer"),
        ],
    )
    def test_record_error_wording(self, event_factory, payload, reason):
        """Test that skipped-event messages describe the payload, not model internals."""
        with pytest.raises(RecordError) as exc_info:
            self._classify(event_factory, event_type="PullRequestEvent", payload=payload)

        message = str(exc_info.value)
        assert reason in message
        assert "_NumberedRef" not in message
