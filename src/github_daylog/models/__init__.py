"""Data models for GitHub Daylog."""

from github_daylog.models.event import (
    EventLink,
    EventType,
    GitHubEvent,
    IssueCommentLink,
    IssueLink,
    PullRequestLink,
    RepositoryLink,
)

__all__ = [
    "GitHubEvent",
    "EventType",
    "EventLink",
    "PullRequestLink",
    "IssueLink",
    "IssueCommentLink",
    "RepositoryLink",
]
