"""Deploy key management for GitHub repositories."""

from __future__ import annotations

from deploykeys.github import (
    DeployKey,
    DeployKeyService,
    GitHubRESTClient,
    GitHubRESTConfig,
    RepositoryId,
    RepositoryIdProvider,
)

__all__ = [
    "DeployKey",
    "DeployKeyService",
    "GitHubRESTClient",
    "GitHubRESTConfig",
    "RepositoryId",
    "RepositoryIdProvider",
]

__version__ = "0.1.0"
