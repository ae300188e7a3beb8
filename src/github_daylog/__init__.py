"""GitHub Daylog - Report one day of your GitHub activity as markdown.

Resolves who the token belongs to, fetches that user's events feed, keeps the
events created on the requested day and renders each one as a markdown bullet
with a deep link to the pull request, issue, comment or repository.

Example usage:
    ```python
    from datetime import date
    import sys

    from github_daylog import Config, GitHubDaylog

    async with GitHubDaylog(Config(github_token="ghp_xxx")) as client:
        await client.write_report(date(2024, 5, 1), sys.stdout)
    ```
"""

from github_daylog._version import version as __version__
from github_daylog.config import Config, parse_target_date
from github_daylog.exceptions import (
    AuthenticationError,
    ConfigurationError,
    FetchError,
    GitHubAPIError,
    GitHubDaylogError,
    GitHubNotFoundError,
    IdentityResolutionError,
    RecordError,
)
from github_daylog.models import (
    EventLink,
    EventType,
    GitHubEvent,
    IssueCommentLink,
    IssueLink,
    PullRequestLink,
    RepositoryLink,
)
from github_daylog.sdk import GitHubDaylog

__all__ = [
    "__version__",
    # Main SDK class
    "GitHubDaylog",
    # Configuration
    "Config",
    "parse_target_date",
    # Exceptions
    "GitHubDaylogError",
    "ConfigurationError",
    "GitHubAPIError",
    "AuthenticationError",
    "GitHubNotFoundError",
    "IdentityResolutionError",
    "FetchError",
    "RecordError",
    # Models
    "GitHubEvent",
    "EventType",
    "EventLink",
    "PullRequestLink",
    "IssueLink",
    "IssueCommentLink",
    "RepositoryLink",
]
