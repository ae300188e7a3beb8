"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable

import httpx
import pytest

from github_daylog.config import Config

API_URL = "https://api.github.com"


@pytest.fixture
def test_config():
    """Create a test configuration."""
    return Config(
        github_token="test_token",
        github_api_url=API_URL,
        github_web_url="https://github.com",
    )


def make_event(
    event_type: str = "PushEvent",
    created_at: str | None = "2024-05-01T10:00:00Z",
    repo: str = "acme/widgets",
    payload: dict | None = None,
    event_id: str = "1",
) -> dict:
    """Build an event dict shaped like the Events API response."""
    data = {
        "id": event_id,
        "type": event_type,
        "repo": {"id": 1, "name": repo, "url": f"{API_URL}/repos/{repo}"},
        "payload": payload or {},
        "public": True,
    }
    if created_at is not None:
        data["created_at"] = created_at
    return data


@pytest.fixture
def event_factory() -> Callable[..., dict]:
    """Factory for Events API event dicts."""
    return make_event


@pytest.fixture
def github_api() -> Callable[..., httpx.MockTransport]:
    """Build a mock transport serving ``/user`` and ``/users/{login}/events``.

    Every request is recorded on ``transport.requests``.
    """

    def build(
        login: str = "octocat",
        events: list | None = None,
        user_status: int = 200,
        events_status: int = 200,
        user_body: object | None = None,
        events_body: object | None = None,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.path == "/user":
                body = user_body if user_body is not None else {"login": login, "id": 1}
                return httpx.Response(user_status, content=json.dumps(body))
            if request.url.path == f"/users/{login}/events":
                body = events_body if events_body is not None else (events or [])
                return httpx.Response(events_status, content=json.dumps(body))
            return httpx.Response(404, json={"message": "Not Found"})

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return build
