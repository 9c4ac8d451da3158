"""Repository identifiers used to address REST resources."""

from __future__ import annotations

import dataclasses
import typing as typ
import urllib.parse

from deploykeys.common.slug import parse_repo_slug, repo_slug

_GIT_SUFFIX = ".git"


class RepositoryIdProvider(typ.Protocol):
    """Anything that can name a repository as ``owner/name``."""

    def generate_id(self) -> str | None:
        """Return the canonical repository id, or ``None`` when unknown."""
        ...


@dataclasses.dataclass(frozen=True, slots=True)
class RepositoryId:
    """Owner and name of a GitHub repository.

    Implements :class:`RepositoryIdProvider`.

    Examples
    --------
    >>> RepositoryId.from_slug("octocat/Hello-World").generate_id()
    'octocat/Hello-World'

    """

    owner: str
    name: str

    def __post_init__(self) -> None:
        """Reject blank owners and names."""
        if not self.owner.strip() or not self.name.strip():
            msg = f"Repository owner and name must be non-empty: {self!r}"
            raise ValueError(msg)

    @classmethod
    def from_slug(cls, slug: str) -> RepositoryId:
        """Build an id from ``owner/name``."""
        owner, name = parse_repo_slug(slug)
        return cls(owner=owner, name=name)

    @classmethod
    def from_url(cls, url: str) -> RepositoryId:
        """Build an id from a repository URL.

        Accepts web and clone URLs such as
        ``https://github.com/octocat/Hello-World`` or
        ``https://github.com/octocat/Hello-World.git``. Only the first two
        path segments are used.

        Raises
        ------
        ValueError
            If the URL has no host or fewer than two path segments.

        """
        parsed = urllib.parse.urlsplit(url.strip())
        segments = [segment for segment in parsed.path.split("/") if segment]
        if not parsed.netloc or len(segments) < 2:  # noqa: PLR2004 - owner/name
            msg = f"Repository URL must include owner and name, got {url!r}"
            raise ValueError(msg)

        owner, name = segments[0], segments[1]
        name = name.removesuffix(_GIT_SUFFIX)
        return cls(owner=owner, name=name)

    def generate_id(self) -> str:
        """Return ``owner/name``."""
        return repo_slug(self.owner, self.name)

    def __str__(self) -> str:
        """Render as the repository slug."""
        return self.generate_id()
