"""Unit-test fixtures for the GitHub REST client and services."""

from __future__ import annotations

import typing as typ

import pytest
import pytest_asyncio

from deploykeys.github import DeployKeyService, RepositoryId
from tests.helpers.github_api import FakeGitHubAPI

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from deploykeys.github import GitHubRESTClient


@pytest.fixture
def github_api() -> FakeGitHubAPI:
    """Return an empty fake GitHub API."""
    return FakeGitHubAPI()


@pytest_asyncio.fixture
async def rest_client(
    github_api: FakeGitHubAPI,
) -> cabc.AsyncIterator[GitHubRESTClient]:
    """Yield a REST client bound to the fake API."""
    http_client = github_api.http_client()
    try:
        yield github_api.rest_client(http_client)
    finally:
        await http_client.aclose()


@pytest.fixture
def deploy_key_service(rest_client: GitHubRESTClient) -> DeployKeyService:
    """Return a deploy key service using the fake-backed client."""
    return DeployKeyService(rest_client)


@pytest.fixture
def hello_world() -> RepositoryId:
    """Return the ``octocat/Hello-World`` repository id."""
    return RepositoryId(owner="octocat", name="Hello-World")
