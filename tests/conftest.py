"""Shared fixtures: a fake GitHub client and a TestClient wired to it."""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from profile_gateway.core.config import Settings
from profile_gateway.services.github import UpstreamError, get_github_client


class FakeGitHub:
    """In-memory stand-in for GitHubClient with the same public methods."""

    def __init__(self, users=None, repos=None, languages=None, errors=None):
        self.users = users or {}
        self.repos = repos or {}
        self.languages = languages or {}
        self.errors = errors or {}
        self.language_calls = []

    def _fail(self, key):
        if key in self.errors:
            raise self.errors[key]

    def get_user(self, username):
        self._fail("user")
        if username not in self.users:
            raise UpstreamError(404, '{"message": "Not Found"}')
        return self.users[username]

    def list_repos(self, username):
        self._fail("repos")
        if username not in self.repos:
            raise UpstreamError(404, '{"message": "Not Found"}')
        return self.repos[username]

    def get_languages(self, repo):
        self.language_calls.append(repo["name"])
        self._fail(("languages", repo["name"]))
        return self.languages.get(repo["name"], {})


def repo(name, stars=0, topics=None, **extra):
    data = {
        "name": name,
        "stargazers_count": stars,
        "forks_count": 1,
        "watchers_count": stars,
        "language": "Python",
        "updated_at": "2024-01-01T00:00:00Z",
        "html_url": f"https://github.com/octocat/{name}",
        "languages_url": f"https://api.github.com/repos/octocat/{name}/languages",
        "owner": {"login": "octocat"},
        "topics": topics if topics is not None else [],
    }
    data.update(extra)
    return data


@pytest.fixture
def make_client():
    def _make(fake, **settings_overrides):
        app = create_app(Settings(**settings_overrides))
        app.dependency_overrides[get_github_client] = lambda: fake
        return TestClient(app)
    return _make
