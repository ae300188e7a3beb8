"""Maps events to the deep link they should render as."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ValidationError

from github_daylog.exceptions import RecordError
from github_daylog.models.event import (
    EventLink,
    EventType,
    GitHubEvent,
    IssueCommentLink,
    IssueLink,
    PullRequestLink,
    RepositoryLink,
)


def _require_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("expected a JSON number")
    return value


JsonNumber = Annotated[int, BeforeValidator(_require_number)]


class _NumberedRef(BaseModel):
    """``payload.pull_request`` or ``payload.issue``."""

    number: JsonNumber


class _CommentRef(BaseModel):
    """``payload.comment``."""

    id: JsonNumber


def _decode(model: type[BaseModel], value: Any, what: str, event: GitHubEvent) -> Any:
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise RecordError(
            f"Error getting {what} for event {event.id} in {event.repo_name}: "
            f"{_describe(e)}",
            event_id=event.id,
        ) from e


def _describe(error: ValidationError) -> str:
    """Word the first validation failure in payload terms."""
    first = error.errors()[0]
    if not first["loc"]:
        return "missing or not an object"
    field = first["loc"][0]
    if first["type"] == "missing":
        return f"{field} is missing"
    return f"{field} is not an integer"


def classify_event(event: GitHubEvent) -> EventLink:
    """Build the link variant for ``event``.

    Raises:
        RecordError: If the repo name, the type, or a payload field the link
            needs is missing or has the wrong type.
    """
    if event.repo_name is None:
        raise RecordError(f"Error getting repo name for event {event.id}", event_id=event.id)
    if event.type is None:
        raise RecordError(f"Error getting event type for event {event.id}", event_id=event.id)

    common = {"event_type": event.type, "repo_name": event.repo_name}
    payload = event.payload

    if event.event_type is EventType.PULL_REQUEST:
        pr = _decode(_NumberedRef, payload.get("pull_request"), "PR number", event)
        return PullRequestLink(number=pr.number, **common)

    if event.event_type is EventType.ISSUES:
        issue = _decode(_NumberedRef, payload.get("issue"), "issue number", event)
        return IssueLink(number=issue.number, **common)

    if event.event_type is EventType.ISSUE_COMMENT:
        comment = _decode(_CommentRef, payload.get("comment"), "comment ID", event)

        # Issue checked first, pull request second
        if isinstance(payload.get("issue"), dict):
            issue = _decode(_NumberedRef, payload["issue"], "issue number", event)
            return IssueCommentLink(comment_id=comment.id, issue_number=issue.number, **common)
        if isinstance(payload.get("pull_request"), dict):
            pr = _decode(_NumberedRef, payload["pull_request"], "PR number", event)
            return IssueCommentLink(comment_id=comment.id, pull_number=pr.number, **common)
        raise RecordError(
            f"Error getting issue or PR information for comment in event {event.id}",
            event_id=event.id,
        )

    return RepositoryLink(**common)
