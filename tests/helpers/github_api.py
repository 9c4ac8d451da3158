"""In-memory GitHub REST API served through ``httpx.MockTransport``."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import json
import typing as typ

import httpx

from deploykeys.github import GitHubRESTClient, GitHubRESTConfig

BASE_URL = "https://api.github.test"
TOKEN = "test-token"  # noqa: S105 - fixed test credential

Responder = cabc.Callable[[httpx.Request], httpx.Response]


@dataclasses.dataclass(frozen=True, slots=True)
class RecordedRequest:
    """Request observed by :class:`FakeGitHubAPI`."""

    method: str
    path: str
    params: dict[str, str]
    headers: httpx.Headers
    body: typ.Any


def echo(request: httpx.Request) -> httpx.Response:
    """Answer with the request body, as GitHub does for a created resource."""
    return httpx.Response(
        201,
        content=request.content,
        headers={"Content-Type": "application/json"},
    )


class FakeGitHubAPI:
    """Route table of canned responses keyed by method and path.

    Responders registered for the same route are served in order; the last
    one keeps answering once the others are used up. Unknown routes get a
    GitHub-style 404.
    """

    def __init__(self, base_url: str = BASE_URL) -> None:
        """Start with no routes and no recorded requests."""
        self.base_url = base_url
        self.requests: list[RecordedRequest] = []
        self._routes: dict[tuple[str, str], list[Responder]] = {}

    def route(self, method: str, path: str, responder: Responder) -> None:
        """Register a callable answering ``method path``."""
        self._routes.setdefault((method, path), []).append(responder)

    def respond(
        self,
        method: str,
        path: str,
        *,
        status_code: int = 200,
        json_body: object = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Register a fixed JSON response for ``method path``."""

        def _responder(request: httpx.Request) -> httpx.Response:
            del request
            return httpx.Response(status_code, json=json_body, headers=headers)

        self.route(method, path, _responder)

    def page_link(self, path: str, page: int, per_page: int = 100) -> str:
        """Return a ``Link`` header advertising ``page`` as the next page."""
        return f'<{self.base_url}{path}?page={page}&per_page={per_page}>; rel="next"'

    def __call__(self, request: httpx.Request) -> httpx.Response:
        """Record ``request`` and dispatch it to the registered responder."""
        body = json.loads(request.content) if request.content else None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                params=dict(request.url.params),
                headers=request.headers,
                body=body,
            )
        )
        responders = self._routes.get((request.method, request.url.path))
        if not responders:
            return httpx.Response(
                404,
                json={
                    "message": "Not Found",
                    "documentation_url": "https://docs.github.com/rest",
                },
            )
        responder = responders.pop(0) if len(responders) > 1 else responders[0]
        return responder(request)

    def http_client(self) -> httpx.AsyncClient:
        """Return an httpx client wired to this fake."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def rest_client(
        self, http_client: httpx.AsyncClient, **overrides: typ.Any
    ) -> GitHubRESTClient:
        """Return a REST client pointed at this fake."""
        config = GitHubRESTConfig(token=TOKEN, api_url=self.base_url, **overrides)
        return GitHubRESTClient(config, http_client=http_client)
