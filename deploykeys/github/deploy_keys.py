"""Service for a repository's deploy keys.

See https://docs.github.com/en/rest/deploy-keys for the endpoints wrapped
here.
"""

from __future__ import annotations

import typing as typ

from deploykeys.logging import get_logger, log_info

from .errors import DeployKeyArgumentError
from .models import DeployKey
from .service import SEGMENT_KEYS, GitHubService

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .repository import RepositoryIdProvider
    from .request import PagedRequest

logger = get_logger(__name__)


class DeployKeyService(GitHubService):
    """List, read, create, edit and delete deploy keys of one repository."""

    def _keys_uri(self, repository_id: str) -> str:
        return f"{self._repository_uri(repository_id)}{SEGMENT_KEYS}"

    def _key_uri(self, repository_id: str, key_id: int) -> str:
        return f"{self._keys_uri(repository_id)}/{key_id}"

    def _keys_request(self, repository: RepositoryIdProvider) -> PagedRequest:
        uri = self._keys_uri(self._get_id(repository))
        return self._create_paged_request(uri, list[DeployKey])

    async def list_keys(self, repository: RepositoryIdProvider) -> list[DeployKey]:
        """Return every deploy key of ``repository``.

        All pages are fetched and concatenated in the order GitHub returns
        them. The result is never ``None`` but may be empty.
        """
        return await self._client.get_all(self._keys_request(repository))

    def iter_keys(
        self, repository: RepositoryIdProvider
    ) -> cabc.AsyncIterator[DeployKey]:
        """Yield deploy keys of ``repository`` lazily, one page at a time.

        The repository id is resolved immediately; pages are fetched only as
        the iterator advances.
        """
        return self._client.page_iterator(self._keys_request(repository)).items()

    async def get_key(self, repository: RepositoryIdProvider, key_id: int) -> DeployKey:
        """Return the deploy key ``key_id`` of ``repository``.

        Raises
        ------
        GitHubNotFoundError
            If the repository has no key with that id.

        """
        uri = self._key_uri(self._get_id(repository), key_id)
        response = await self._client.get(self._create_request(uri, DeployKey))
        return response.body

    async def create_key(
        self, repository: RepositoryIdProvider, key: DeployKey | None
    ) -> DeployKey:
        """Add ``key`` to ``repository`` and return it with its server id.

        ``title`` and ``key`` must be set; any ``id`` on the argument is sent
        as-is and ignored by GitHub. ``None`` is posted without a body and
        GitHub's rejection is raised as
        :class:`~deploykeys.github.errors.GitHubAPIError`.
        """
        repository_id = self._get_id(repository)
        created: DeployKey = await self._client.post(
            self._keys_uri(repository_id), key, DeployKey
        )
        log_info(
            logger,
            "Created deploy key %s (%s) on %s",
            created.id,
            created.title,
            repository_id,
        )
        return created

    async def edit_key(
        self, repository: RepositoryIdProvider, key: DeployKey | None
    ) -> DeployKey:
        """Update the existing deploy key identified by ``key.id``.

        Raises
        ------
        DeployKeyArgumentError
            If ``key`` is ``None`` or has no id. No request is sent.

        """
        if key is None:
            raise DeployKeyArgumentError.missing_key()
        if key.id is None:
            raise DeployKeyArgumentError.missing_id()

        repository_id = self._get_id(repository)
        edited: DeployKey = await self._client.post(
            self._key_uri(repository_id, key.id), key, DeployKey
        )
        log_info(logger, "Edited deploy key %s on %s", key.id, repository_id)
        return edited

    async def delete_key(self, repository: RepositoryIdProvider, key_id: int) -> None:
        """Remove the deploy key ``key_id`` from ``repository``."""
        repository_id = self._get_id(repository)
        await self._client.delete(self._key_uri(repository_id, key_id))
        log_info(logger, "Deleted deploy key %s from %s", key_id, repository_id)
