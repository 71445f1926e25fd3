"""Root conftest - shared JSON payloads and a recording trace sink.

Invariants:
    - Every fixture returns a fresh dict (tests may mutate it freely)
    - Payloads mirror the GitHub v3 search API shape
"""

import os
from typing import Any

import pytest

# Ensure tests never pick up a developer's real configuration
os.environ.setdefault("GH_SEARCH_API_BASE_URL", "https://api.github.com")


def make_owner_json() -> dict[str, Any]:
    return {
        "login": "octocat",
        "id": 583231,
        "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
        "gravatar_id": "",
        "url": "https://api.github.com/users/octocat",
        "received_events_url": "https://api.github.com/users/octocat/received_events",
        "type": "User",
    }


def make_repository_json(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": 1,
        "name": "foo",
        "full_name": "a/foo",
        "owner": make_owner_json(),
        "private": False,
        "html_url": "https://github.com/a/foo",
        "description": "A foo repository",
        "fork": False,
        "url": "https://api.github.com/repos/a/foo",
        "created_at": "2018-02-08T10:20:30Z",
        "updated_at": "2018-02-09T11:00:00Z",
        "pushed_at": "2018-02-09T12:00:00Z",
        "homepage": "https://foo.example.com",
        "size": 120,
        "stargazers_count": 42,
        "watchers_count": 42,
        "language": "Python",
        "forks_count": 3,
        "open_issues_count": 5,
        "default_branch": "main",
        "score": 1.0,
    }
    data.update(overrides)
    return data


def make_search_json(*items: dict[str, Any]) -> dict[str, Any]:
    return {
        "total_count": len(items),
        "incomplete_results": False,
        "items": list(items),
    }


class RecordingTrace:
    """TraceSink that keeps every call for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def trace(self, event: str, **params: Any) -> None:
        self.events.append(("trace", event, params))

    def debug(self, message: str, **params: Any) -> None:
        self.events.append(("debug", message, params))


@pytest.fixture
def owner_json() -> dict[str, Any]:
    return make_owner_json()


@pytest.fixture
def repository_json() -> dict[str, Any]:
    return make_repository_json()


@pytest.fixture
def search_json() -> dict[str, Any]:
    return make_search_json(make_repository_json())


@pytest.fixture
def recording_trace() -> RecordingTrace:
    return RecordingTrace()


@pytest.fixture
def make_repository():
    return make_repository_json


@pytest.fixture
def make_search():
    return make_search_json
