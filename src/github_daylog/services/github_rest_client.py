"""GitHub REST API client."""

import logging
from typing import Any, Optional

import httpx

from github_daylog._version import version as __version__
from github_daylog.config import Config
from github_daylog.exceptions import (
    AuthenticationError,
    GitHubAPIError,
    GitHubNotFoundError,
)

logger = logging.getLogger(__name__)


class GitHubRestClient:
    """Async client for GitHub REST API.

    Requests are issued one at a time and never retried.
    """

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"github-daylog/{__version__}",
            "Authorization": f"token {self.config.github_token}",
        }

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """Make an API request and raise on any non-success status."""
        client = self._get_client()
        logger.debug("%s %s", method, endpoint)
        try:
            # The body is fully read before the connection is released
            response = await client.request(method, endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"Request to {endpoint} failed: {e}") from e

        if response.is_success:
            return response

        body = _error_body(response)
        message = body.get("message", "Unknown error") if body else "Unknown error"
        if response.status_code == 401:
            raise AuthenticationError(
                f"Bad credentials: {message}",
                response_body=body,
            )
        elif response.status_code == 404:
            raise GitHubNotFoundError(
                f"Resource not found: {endpoint}",
                response_body=body,
            )
        elif response.status_code >= 500:
            raise GitHubAPIError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
                response_body=body,
            )
        raise GitHubAPIError(
            f"API error ({response.status_code}): {message}",
            status_code=response.status_code,
            response_body=body,
        )

    async def get(self, endpoint: str, **kwargs) -> Any:
        """Make a GET request and return the decoded JSON body."""
        response = await self._request("GET", endpoint, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"Malformed JSON from {endpoint}: {e}",
                status_code=response.status_code,
            ) from e

    # Convenience methods for common endpoints

    async def get_authenticated_user(self) -> Any:
        """Get the profile of the token's owner."""
        return await self.get("/user")

    async def get_user_events(self, username: str) -> Any:
        """Get the first page of a user's events (newest first)."""
        return await self.get(f"/users/{username}/events")


def _error_body(response: httpx.Response) -> dict | None:
    """Decode an error response body, if it is a JSON object."""
    if not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None
