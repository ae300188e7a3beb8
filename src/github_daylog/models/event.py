"""Event and deep-link data models."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from github_daylog.exceptions import RecordError


class EventType(str, Enum):
    """GitHub event types."""

    PUSH = "PushEvent"
    PULL_REQUEST = "PullRequestEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"
    PULL_REQUEST_REVIEW_COMMENT = "PullRequestReviewCommentEvent"
    ISSUES = "IssuesEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    FORK = "ForkEvent"
    WATCH = "WatchEvent"
    RELEASE = "ReleaseEvent"
    COMMIT_COMMENT = "CommitCommentEvent"
    GOLLUM = "GollumEvent"  # Wiki events
    PUBLIC = "PublicEvent"
    MEMBER = "MemberEvent"
    OTHER = "Other"


class GitHubEvent(BaseModel):
    """GitHub event from the Events API.

    Fields the API omitted or sent with the wrong type are kept as None so
    that one bad record never breaks decoding of the whole feed.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    type: str | None = None
    created_at: str | None = None
    repo_name: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GitHubEvent":
        """Create from GitHub Events API response."""
        repo = data.get("repo")
        payload = data.get("payload")
        return cls(
            id=str(data.get("id", "")),
            type=_str_or_none(data.get("type")),
            created_at=_str_or_none(data.get("created_at")),
            repo_name=_str_or_none(repo.get("name")) if isinstance(repo, dict) else None,
            payload=payload if isinstance(payload, dict) else {},
        )

    @property
    def event_type(self) -> EventType:
        """Get typed event type."""
        try:
            return EventType(self.type)
        except ValueError:
            return EventType.OTHER

    def created_datetime(self) -> datetime:
        """Parse ``created_at``, keeping the offset it was encoded with.

        Raises:
            RecordError: If the timestamp is missing, malformed or has no offset.
        """
        if self.created_at is None:
            raise RecordError("Event has no created_at timestamp", event_id=self.id)
        parsed = _parse_datetime(self.created_at)
        if parsed is None or parsed.tzinfo is None:
            raise RecordError(
                f"Invalid created_at timestamp: {self.created_at!r}",
                event_id=self.id,
            )
        return parsed


class EventLink(BaseModel):
    """A classified event pointing at its repository."""

    model_config = ConfigDict(frozen=True)

    event_type: str
    repo_name: str

    def path(self) -> str:
        """URL suffix after the repository path."""
        return ""

    def url(self, host: str = "https://github.com") -> str:
        """Deep link for this event on ``host``."""
        return f"{host}/{self.repo_name}{self.path()}"


class PullRequestLink(EventLink):
    """Pull request activity."""

    number: int

    def path(self) -> str:
        return f"/pull/{self.number}"


class IssueLink(EventLink):
    """Issue activity."""

    number: int

    def path(self) -> str:
        return f"/issues/{self.number}"


class IssueCommentLink(EventLink):
    """Comment on an issue or a pull request.

    At least one of ``issue_number`` and ``pull_number`` must be set; the
    issue wins when both are.
    """

    comment_id: int
    issue_number: int | None = None
    pull_number: int | None = None

    @model_validator(mode="after")
    def _require_target(self) -> "IssueCommentLink":
        if self.issue_number is None and self.pull_number is None:
            raise ValueError("issue_number or pull_number is required")
        return self

    def path(self) -> str:
        if self.issue_number is not None:
            return f"/issues/{self.issue_number}#issuecomment-{self.comment_id}"
        return f"/pull/{self.pull_number}#issuecomment-{self.comment_id}"


class RepositoryLink(EventLink):
    """Any other activity; links to the repository itself."""

    pass


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _parse_datetime(value: str | None) -> datetime | None:
    """Parse ISO datetime string."""
    if not value:
        return None
    try:
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
