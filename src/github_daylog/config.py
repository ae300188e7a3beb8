"""Configuration management for GitHub Daylog."""

import os
import re
from dataclasses import dataclass
from datetime import date

from dotenv import load_dotenv

from github_daylog.exceptions import ConfigurationError

DATE_FORMAT = "YYYY-MM-DD"
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass
class Config:
    """Application configuration."""

    github_token: str
    github_api_url: str = "https://api.github.com"
    github_web_url: str = "https://github.com"  # Host for deep links

    report_label: str = "GitHub activity"

    # Timeouts
    request_timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.github_token:
            raise ConfigurationError("A GitHub personal access token is required")

    @classmethod
    def from_env(cls, token: str) -> "Config":
        """Build configuration for ``token`` with overrides from the environment."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        timeout = os.getenv("GITHUB_DAYLOG_TIMEOUT")
        try:
            request_timeout = float(timeout) if timeout else 30.0
        except ValueError as e:
            raise ConfigurationError(f"Invalid GITHUB_DAYLOG_TIMEOUT: {timeout}") from e

        return cls(
            github_token=token,
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            github_web_url=os.getenv("GITHUB_WEB_URL", "https://github.com"),
            request_timeout=request_timeout,
        )

    @property
    def web_host(self) -> str:
        """Link host without a trailing slash."""
        return self.github_web_url.rstrip("/")


def parse_target_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD string into a calendar date.

    Raises:
        ConfigurationError: If the string is not a zero-padded YYYY-MM-DD
            form of a real calendar date.
    """
    if not value or not _DATE_PATTERN.match(value):
        raise ConfigurationError(f"Invalid date format: {value!r}. Use {DATE_FORMAT}")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid date: {value!r} ({e})") from e
