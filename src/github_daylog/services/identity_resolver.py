"""Resolves the login of the token's owner."""

import logging

from github_daylog.exceptions import GitHubAPIError, IdentityResolutionError
from github_daylog.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Looks up who the configured token belongs to."""

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    async def resolve(self) -> str:
        """Return the authenticated user's login.

        Raises:
            IdentityResolutionError: If the request fails or the response
                carries no usable ``login``.
        """
        logger.debug("Resolving authenticated user")

        try:
            user = await self.rest_client.get_authenticated_user()
        except GitHubAPIError as e:
            raise IdentityResolutionError(
                f"Could not resolve authenticated user: {e}", cause=e
            ) from e

        if not isinstance(user, dict):
            raise IdentityResolutionError(
                f"Unexpected /user response: expected an object, got {type(user).__name__}"
            )

        login = user.get("login")
        if not isinstance(login, str) or not login:
            raise IdentityResolutionError("Response from /user has no login")

        logger.debug("Authenticated as %s", login)
        return login
