"""GitHub REST client and deploy key service."""

from __future__ import annotations

from .client import GitHubRESTClient, GitHubRESTConfig
from .deploy_keys import DeployKeyService
from .errors import (
    DeployKeyArgumentError,
    GitHubAPIError,
    GitHubConfigError,
    GitHubNotFoundError,
    GitHubResponseShapeError,
)
from .models import DeployKey
from .paging import PageIterator, PageLinks
from .repository import RepositoryId, RepositoryIdProvider
from .request import GitHubRequest, GitHubResponse, PagedRequest
from .service import GitHubService

__all__ = [
    "DeployKey",
    "DeployKeyArgumentError",
    "DeployKeyService",
    "GitHubAPIError",
    "GitHubConfigError",
    "GitHubNotFoundError",
    "GitHubRESTClient",
    "GitHubRESTConfig",
    "GitHubRequest",
    "GitHubResponse",
    "GitHubResponseShapeError",
    "GitHubService",
    "PageIterator",
    "PageLinks",
    "PagedRequest",
    "RepositoryId",
    "RepositoryIdProvider",
]
