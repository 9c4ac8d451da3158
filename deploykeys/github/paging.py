"""Link-header pagination for REST collections.

GitHub splits collections into pages and advertises the continuation in an
RFC 8288 ``Link`` header::

    Link: <https://api.github.com/repositories/1/keys?page=2>; rel="next",
          <https://api.github.com/repositories/1/keys?page=5>; rel="last"

:class:`PageIterator` follows ``rel="next"`` until the header stops
advertising one.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import typing as typ

from .request import GitHubRequest, GitHubResponse, PagedRequest

_RELATIONS = frozenset({"first", "last", "next", "prev"})


@dataclasses.dataclass(frozen=True, slots=True)
class PageLinks:
    """Page URLs advertised by a response ``Link`` header."""

    first: str | None = None
    last: str | None = None
    next: str | None = None
    prev: str | None = None

    @classmethod
    def from_header(cls, value: str | None) -> PageLinks:
        """Parse a ``Link`` header value; unknown relations are ignored."""
        if not value:
            return cls()

        found: dict[str, str] = {}
        for link in value.split(","):
            target, *link_params = link.split(";")
            target = target.strip()
            if not (target.startswith("<") and target.endswith(">")):
                continue
            url = target[1:-1]
            for param in link_params:
                name, sep, raw = param.strip().partition("=")
                if not sep or name.strip().lower() != "rel":
                    continue
                for relation in raw.strip().strip('"').lower().split():
                    if relation in _RELATIONS:
                        found.setdefault(relation, url)
        return cls(**found)

    @classmethod
    def from_response(cls, response: GitHubResponse) -> PageLinks:
        """Parse the ``Link`` header of ``response``."""
        return cls.from_header(response.headers.get("link"))


class PageFetcher(typ.Protocol):
    """Client capable of issuing a single GET."""

    async def get(self, request: GitHubRequest) -> GitHubResponse:
        """Fetch and decode one response."""
        ...


T = typ.TypeVar("T")


class PageIterator(typ.Generic[T]):
    """Lazy, restartable sequence of pages for a :class:`PagedRequest`.

    Nothing is fetched until iteration starts. Each ``async for`` begins
    again at the request's first page, so one iterator can be consumed more
    than once. An empty page ends iteration even if a ``next`` link is
    present.
    """

    def __init__(self, fetcher: PageFetcher, request: PagedRequest) -> None:
        """Bind the iterator to a client and the collection request."""
        self._fetcher = fetcher
        self._request = request

    @property
    def request(self) -> PagedRequest:
        """Return the collection request being iterated."""
        return self._request

    def __aiter__(self) -> cabc.AsyncIterator[list[T]]:
        """Start a fresh pass from the first page."""
        return self._iter_pages()

    async def _iter_pages(self) -> cabc.AsyncIterator[list[T]]:
        request: GitHubRequest | None = self._request.first_page()
        while request is not None:
            response = await self._fetcher.get(request)
            page: list[T] = list(response.body or ())
            if not page:
                return
            yield page

            next_uri = PageLinks.from_response(response).next
            request = (
                None
                if next_uri is None
                else GitHubRequest(uri=next_uri, result_type=self._request.result_type)
            )

    async def items(self) -> cabc.AsyncIterator[T]:
        """Yield individual items across all pages in server order."""
        async for page in self:
            for item in page:
                yield item

    async def collect(self) -> list[T]:
        """Return every item of every page as one list."""
        return [item async for item in self.items()]
