"""Shared GitHub REST client used by the resource services."""

from __future__ import annotations

import dataclasses
import os
import typing as typ

import httpx
import msgspec

from deploykeys.logging import get_logger, log_debug, log_warning

from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError
from .models import GitHubErrorPayload
from .paging import PageIterator
from .request import DEFAULT_PAGE_SIZE, GitHubRequest, GitHubResponse, PagedRequest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import types

logger = get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
_MEDIA_TYPE = "application/vnd.github+json"
_HTTP_ERROR_STATUS_THRESHOLD = 400
_UNKNOWN_RATE_LIMIT = -1


N = typ.TypeVar("N", int, float)


def _parse_positive_number(
    env_var: str, default: N, convert: cabc.Callable[[str], N]
) -> N:
    """Read a positive numeric env var, falling back to a default."""
    raw = os.environ.get(env_var, "")
    if not raw.strip():
        return default
    try:
        value = convert(raw.strip())
    except ValueError as exc:
        msg = f"{env_var} must be a number, got: {raw!r}"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = f"{env_var} must be positive, got: {value}"
        raise ValueError(msg)
    return value


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubRESTConfig:
    """Configuration for the GitHub REST API client.

    Attributes
    ----------
    token
        Personal access or installation token sent as a bearer token.
    api_url
        Root of the REST API. ``https://api.github.com`` for github.com;
        ``https://{host}/api/v3`` for Enterprise Server.
    timeout_s
        Per-request timeout in seconds.
    user_agent
        ``User-Agent`` header value; GitHub rejects requests without one.
    page_size
        ``per_page`` used for collection requests.

    """

    token: str
    api_url: str = DEFAULT_API_URL
    timeout_s: float = 20.0
    user_agent: str = "deploykeys/0.1"
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_env(cls) -> GitHubRESTConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``DEPLOYKEYS_GITHUB_TOKEN``: API token (required).
        - ``DEPLOYKEYS_GITHUB_API_URL``: REST API root.
        - ``DEPLOYKEYS_GITHUB_TIMEOUT_S``: positive request timeout.
        - ``DEPLOYKEYS_GITHUB_PAGE_SIZE``: positive ``per_page`` value.

        Raises
        ------
        GitHubConfigError
            If no token is configured.
        ValueError
            If the timeout or page size is not a positive number.

        """
        token = os.environ.get("DEPLOYKEYS_GITHUB_TOKEN", "").strip()
        if not token:
            raise GitHubConfigError.missing_token()

        api_url = os.environ.get("DEPLOYKEYS_GITHUB_API_URL", "").strip()
        return cls(
            token=token,
            api_url=api_url or DEFAULT_API_URL,
            timeout_s=_parse_positive_number(
                "DEPLOYKEYS_GITHUB_TIMEOUT_S", 20.0, float
            ),
            page_size=_parse_positive_number(
                "DEPLOYKEYS_GITHUB_PAGE_SIZE", DEFAULT_PAGE_SIZE, int
            ),
        )

    @classmethod
    def for_enterprise_host(cls, token: str, host: str) -> GitHubRESTConfig:
        """Build configuration for a GitHub Enterprise Server host."""
        return cls(token=token, api_url=f"https://{host.strip('/')}/api/v3")


def _type_name(result_type: object) -> str:
    """Return a readable name for a decode target such as ``list[DeployKey]``."""
    if isinstance(result_type, type):
        return result_type.__name__
    return repr(result_type)


def _header_int(headers: httpx.Headers, name: str) -> int:
    """Read an integer header, returning ``-1`` when absent or malformed."""
    raw = headers.get(name)
    if raw is None:
        return _UNKNOWN_RATE_LIMIT
    try:
        return int(raw)
    except ValueError:
        return _UNKNOWN_RATE_LIMIT


class GitHubRESTClient:
    """Authenticated JSON client for the GitHub REST API.

    The client owns authentication headers, URL resolution, JSON encoding
    and decoding, ``Link``-header paging and translation of error statuses
    into :class:`~deploykeys.github.errors.GitHubAPIError`. Transport errors
    raised by httpx propagate unchanged.
    """

    def __init__(
        self,
        config: GitHubRESTConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        if not config.token.strip():
            raise GitHubConfigError.empty_token()

        self._config = config
        self._api_url = config.api_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {config.token}",
            "User-Agent": config.user_agent,
            "Accept": _MEDIA_TYPE,
            "X-GitHub-Api-Version": API_VERSION,
        }
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_s)
        self.remaining_requests = _UNKNOWN_RATE_LIMIT
        self.request_limit = _UNKNOWN_RATE_LIMIT

    @property
    def config(self) -> GitHubRESTConfig:
        """Return the configuration the client was built with."""
        return self._config

    async def __aenter__(self) -> typ.Self:
        """Return the client for use in ``async with`` blocks."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: types.TracebackType | None,
    ) -> None:
        """Close owned HTTP resources on exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def get(self, request: GitHubRequest) -> GitHubResponse:
        """Issue a GET and decode the body into ``request.result_type``."""
        response = await self._send("GET", request.uri, params=request.params)
        return GitHubResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=self._decode(response.content, request.result_type),
        )

    async def post(
        self,
        uri: str,
        body: object = None,
        result_type: typ.Any = None,
    ) -> typ.Any:
        """POST ``body`` as JSON and return the decoded response body."""
        content = None if body is None else msgspec.json.encode(body)
        response = await self._send("POST", uri, content=content)
        return self._decode(response.content, result_type)

    async def delete(self, uri: str) -> None:
        """Issue a DELETE, discarding any response body."""
        await self._send("DELETE", uri)

    def page_iterator(self, request: PagedRequest) -> PageIterator[typ.Any]:
        """Return a lazy iterator over the pages of ``request``."""
        return PageIterator(self, request)

    async def get_all(self, request: PagedRequest) -> list[typ.Any]:
        """Fetch every page of ``request`` and concatenate them in order."""
        return await self.page_iterator(request).collect()

    def _url(self, uri: str) -> str:
        """Resolve ``uri`` against the API root.

        Absolute URLs, as found in ``Link`` headers, must stay under the
        configured root; the bearer token is never sent anywhere else.

        Raises
        ------
        GitHubResponseShapeError
            If an absolute URL points outside ``api_url``.

        """
        if not uri.startswith(("https://", "http://")):
            return f"{self._api_url}{uri}"
        if uri == self._api_url or uri.startswith(f"{self._api_url}/"):
            return uri
        raise GitHubResponseShapeError.foreign_link(uri, self._api_url)

    async def _send(
        self,
        method: str,
        uri: str,
        *,
        params: dict[str, str | int] | None = None,
        content: bytes | None = None,
    ) -> httpx.Response:
        """Send one request and raise for error statuses."""
        url = self._url(uri)
        headers = dict(self._headers)
        if content is not None:
            headers["Content-Type"] = "application/json"

        log_debug(logger, "%s %s", method, url)
        response = await self._client.request(
            method,
            url,
            params=params or None,
            content=content,
            headers=headers,
        )
        self._record_rate_limit(response.headers)
        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise self._api_error(method, url, response)
        return response

    def _record_rate_limit(self, headers: httpx.Headers) -> None:
        """Track the rate-limit budget and warn once it is spent."""
        remaining = _header_int(headers, "X-RateLimit-Remaining")
        limit = _header_int(headers, "X-RateLimit-Limit")
        if remaining != _UNKNOWN_RATE_LIMIT:
            self.remaining_requests = remaining
        if limit != _UNKNOWN_RATE_LIMIT:
            self.request_limit = limit
        if remaining == 0:
            log_warning(
                logger,
                "GitHub rate limit exhausted (limit %d, resets at %s)",
                self.request_limit,
                headers.get("X-RateLimit-Reset", "unknown"),
            )

    @staticmethod
    def _api_error(
        method: str, url: str, response: httpx.Response
    ) -> GitHubAPIError:
        """Build the error for a failed response, logging it at WARNING."""
        try:
            payload = msgspec.json.decode(response.content, type=GitHubErrorPayload)
        except msgspec.DecodeError:
            payload = GitHubErrorPayload(message=response.reason_phrase or None)

        log_warning(
            logger,
            "GitHub REST %s %s failed with HTTP %d: %s",
            method,
            url,
            response.status_code,
            payload.message,
        )
        return GitHubAPIError.from_response(
            response.status_code,
            message=payload.message,
            errors=payload.errors,
            documentation_url=payload.documentation_url,
        )

    @staticmethod
    def _decode(content: bytes, result_type: typ.Any) -> typ.Any:
        """Decode ``content``; an empty body without a type is ``None``."""
        if result_type is None and not content:
            return None
        try:
            if result_type is None:
                return msgspec.json.decode(content)
            return msgspec.json.decode(content, type=result_type)
        except msgspec.DecodeError as exc:
            raise GitHubResponseShapeError.undecodable(
                _type_name(result_type), str(exc)
            ) from exc
