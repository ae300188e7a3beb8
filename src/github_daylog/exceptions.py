"""Exceptions for GitHub Daylog.

Exception Hierarchy:
    GitHubDaylogError (base)
    ├── ConfigurationError (bad token or date, raised before any request)
    ├── GitHubAPIError (HTTP API errors with status codes)
    │   ├── AuthenticationError (401 bad credentials)
    │   └── GitHubNotFoundError (404 not found)
    ├── IdentityResolutionError (could not resolve the token's login)
    ├── FetchError (could not fetch the events feed)
    └── RecordError (a single event is unusable, skipped by the renderer)

Usage:
    - ConfigurationError, IdentityResolutionError and FetchError abort the run
    - RecordError only ever drops the offending event
"""

__all__ = [
    "GitHubDaylogError",
    "ConfigurationError",
    "GitHubAPIError",
    "AuthenticationError",
    "GitHubNotFoundError",
    "IdentityResolutionError",
    "FetchError",
    "RecordError",
]


class GitHubDaylogError(Exception):
    """Base exception for all GitHub Daylog errors."""

    pass


class ConfigurationError(GitHubDaylogError):
    """Raised when the token or target date is missing or invalid."""

    pass


class GitHubAPIError(GitHubDaylogError):
    """Base exception for GitHub API errors.

    ``status_code`` is None when the request never got a response.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class AuthenticationError(GitHubAPIError):
    """Raised when the token is rejected (HTTP 401)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 401,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class IdentityResolutionError(GitHubDaylogError):
    """Raised when the authenticated user's login cannot be determined."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class FetchError(GitHubDaylogError):
    """Raised when the user's events cannot be fetched or decoded."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class RecordError(GitHubDaylogError):
    """Raised for a single malformed event; recoverable."""

    def __init__(self, message: str, event_id: str = ""):
        super().__init__(message)
        self.event_id = event_id
