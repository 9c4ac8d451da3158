"""Request and response value types for the GitHub REST client."""

from __future__ import annotations

import dataclasses
import typing as typ

if typ.TYPE_CHECKING:
    import httpx

DEFAULT_PAGE_SIZE = 100
PARAM_PAGE = "page"
PARAM_PER_PAGE = "per_page"


@dataclasses.dataclass(slots=True)
class GitHubRequest:
    """GET request addressed to the REST API.

    ``uri`` is either a path relative to the configured API URL (for example
    ``/repos/octocat/Hello-World/keys``) or an absolute URL taken from a
    ``Link`` header. ``result_type`` is the type the body is decoded into;
    ``None`` decodes into plain JSON values.
    """

    uri: str
    params: dict[str, str | int] = dataclasses.field(default_factory=dict)
    result_type: typ.Any = None


@dataclasses.dataclass(slots=True)
class PagedRequest(GitHubRequest):
    """GET request for a collection that GitHub splits into pages."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        """Reject page numbers and sizes below one."""
        if self.page < 1:
            msg = f"page must be positive, got: {self.page}"
            raise ValueError(msg)
        if self.page_size < 1:
            msg = f"page_size must be positive, got: {self.page_size}"
            raise ValueError(msg)

    def first_page(self) -> GitHubRequest:
        """Return the request for the page iteration starts from."""
        params: dict[str, str | int] = dict(self.params)
        params[PARAM_PAGE] = self.page
        params[PARAM_PER_PAGE] = self.page_size
        return GitHubRequest(uri=self.uri, params=params, result_type=self.result_type)


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubResponse:
    """Status, headers and decoded body of a successful response."""

    status_code: int
    headers: httpx.Headers
    body: typ.Any
