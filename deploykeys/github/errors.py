"""Errors raised by the GitHub REST client and resource services."""

from __future__ import annotations

import typing as typ

_NOT_FOUND = 404


class GitHubAPIError(RuntimeError):
    """Raised when GitHub answers with an error status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: typ.Sequence[object] = (),
        documentation_url: str | None = None,
    ) -> None:
        """Initialise with the server message and optional error details."""
        self.status_code = status_code
        self.errors = tuple(errors)
        self.documentation_url = documentation_url
        super().__init__(message)

    @classmethod
    def from_response(
        cls,
        status_code: int,
        *,
        message: str | None = None,
        errors: typ.Sequence[object] = (),
        documentation_url: str | None = None,
    ) -> GitHubAPIError:
        """Return the error matching an HTTP status and decoded error body.

        A 404 maps to :class:`GitHubNotFoundError`; everything else to the
        base class.
        """
        error_cls = GitHubNotFoundError if status_code == _NOT_FOUND else cls
        text = f"GitHub REST HTTP {status_code}"
        if message:
            text = f"{text}: {message}"
        if errors:
            text = f"{text} ({len(errors)} validation errors)"
        return error_cls(
            text,
            status_code=status_code,
            errors=errors,
            documentation_url=documentation_url,
        )


class GitHubNotFoundError(GitHubAPIError):
    """Raised when the addressed repository or resource does not exist."""


class GitHubResponseShapeError(RuntimeError):
    """Raised when a response body cannot be decoded into the expected type."""

    @classmethod
    def undecodable(cls, type_name: str, detail: str) -> GitHubResponseShapeError:
        """Return an error for a body that does not match ``type_name``."""
        return cls(f"GitHub response could not be decoded as {type_name}: {detail}")

    @classmethod
    def foreign_link(cls, url: str, api_url: str) -> GitHubResponseShapeError:
        """Return an error for a link that leaves the configured API root."""
        return cls(f"GitHub response linked to {url!r}, outside {api_url!r}")


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def missing_token(cls) -> GitHubConfigError:
        """Return an error when no GitHub token is configured."""
        return cls("DEPLOYKEYS_GITHUB_TOKEN is required for the GitHub API")

    @classmethod
    def empty_token(cls) -> GitHubConfigError:
        """Return an error when the provided token is empty."""
        return cls("GitHub token must be non-empty")


class DeployKeyArgumentError(ValueError):
    """Raised before any request when a deploy key argument is unusable."""

    @classmethod
    def missing_key(cls) -> DeployKeyArgumentError:
        """Return an error for a ``None`` deploy key."""
        return cls("Key cannot be None")

    @classmethod
    def missing_id(cls) -> DeployKeyArgumentError:
        """Return an error for a deploy key that has no server id."""
        return cls("Key id is required to address an existing deploy key")
