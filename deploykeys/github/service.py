"""Base class for REST resource services."""

from __future__ import annotations

import typing as typ

from .request import GitHubRequest, PagedRequest

if typ.TYPE_CHECKING:
    from .client import GitHubRESTClient
    from .repository import RepositoryIdProvider

SEGMENT_REPOS = "/repos"
SEGMENT_KEYS = "/keys"


class GitHubService:
    """Shared plumbing for services built on :class:`GitHubRESTClient`.

    Services hold nothing but the injected client and may be shared freely
    between callers.
    """

    def __init__(self, client: GitHubRESTClient) -> None:
        """Bind the service to a REST client."""
        if client is None:
            msg = "Client cannot be None"
            raise ValueError(msg)
        self._client = client

    @property
    def client(self) -> GitHubRESTClient:
        """Return the REST client requests are delegated to."""
        return self._client

    @staticmethod
    def _get_id(repository: RepositoryIdProvider | None) -> str:
        """Resolve a repository provider to its ``owner/name`` id.

        Raises
        ------
        ValueError
            If the provider is ``None`` or yields an empty id.

        """
        if repository is None:
            msg = "Repository cannot be None"
            raise ValueError(msg)
        repository_id = repository.generate_id()
        if repository_id is None:
            msg = "Repository id cannot be None"
            raise ValueError(msg)
        if not repository_id.strip():
            msg = "Repository id cannot be empty"
            raise ValueError(msg)
        return repository_id

    @staticmethod
    def _repository_uri(repository_id: str) -> str:
        """Return ``/repos/{owner}/{name}`` for a resolved repository id."""
        return f"{SEGMENT_REPOS}/{repository_id}"

    def _create_request(self, uri: str, result_type: typ.Any) -> GitHubRequest:
        return GitHubRequest(uri=uri, result_type=result_type)

    def _create_paged_request(
        self,
        uri: str,
        result_type: typ.Any,
        *,
        page: int = 1,
        page_size: int | None = None,
    ) -> PagedRequest:
        return PagedRequest(
            uri=uri,
            result_type=result_type,
            page=page,
            page_size=page_size or self._client.config.page_size,
        )
