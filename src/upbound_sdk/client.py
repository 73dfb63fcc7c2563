"""Async HTTP client for the Upbound API."""

from __future__ import annotations

import copy
import json
import logging
import posixpath
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Protocol, TypeVar, overload

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .errors import (
    DecodingError,
    EncodingError,
    InvalidTargetError,
    error_for_status,
)
from .settings import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

T = TypeVar("T")

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})
CONTENT_TYPE_JSON = "application/json"


class ResponseErrorHandler(Protocol):
    """Translates HTTP responses into errors.

    ``handle`` raises to report an error, returns True to accept the response
    for decoding, and returns False to defer to the default classification.
    """

    async def handle(self, response: httpx.Response) -> bool: ...


class Client(Protocol):
    """What endpoint clients need from a transport."""

    def new_request(
        self,
        method: str,
        prefix: str,
        url_path: str,
        body: Any = None,
    ) -> httpx.Request: ...

    async def do(self, request: httpx.Request, target: Any = None) -> Any: ...

    def with_options(self, *modifiers: ClientModifier) -> Client: ...


ClientModifier = Callable[["HTTPClient"], None]


class DefaultErrorHandler:
    """Default handling of errors returned by the Upbound API."""

    async def handle(self, response: httpx.Response) -> bool:
        if response.is_success:
            return True
        body = (await response.aread()).decode("utf-8", errors="replace")
        raise error_for_status(response.status_code, response.reason_phrase, body)


class HTTPClient:
    """HTTP client for the Upbound API.

    The underlying ``httpx.AsyncClient`` is the executor: it owns the cookie
    jar, so a session established by a login call is visible to every later
    call made through the same client. Callers sharing a client across tasks
    must let the login complete before issuing session-authenticated calls.

    Example:
        ```python
        client = new_client(with_base_url("https://api.upbound.io"))
        async with client:
            req = client.new_request("GET", "v1/accounts", "")
            accounts = await client.do(req, list[AccountResponse])
        ```
    """

    def __init__(
        self,
        base_url: str | httpx.URL = DEFAULT_BASE_URL,
        http: httpx.AsyncClient | None = None,
        user_agent: str = USER_AGENT,
        error_handler: ResponseErrorHandler | None = None,
        bearer_token: str | None = None,
    ) -> None:
        self.base_url = parse_base_url(base_url)
        self._http = http
        self.user_agent = user_agent
        self.error_handler: ResponseErrorHandler = error_handler or DefaultErrorHandler()
        self.bearer_token = bearer_token

    def _ensure_http(self) -> httpx.AsyncClient:
        """Ensure the executor is initialized."""
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=httpx.Timeout(DEFAULT_TIMEOUT))
        return self._http

    @property
    def http(self) -> httpx.AsyncClient:
        """The executor, created on first use unless one was supplied."""
        return self._ensure_http()

    @http.setter
    def http(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying executor, if one was ever created."""
        if self._http is not None:
            await self._http.aclose()

    def with_options(self, *modifiers: ClientModifier) -> HTTPClient:
        """Return a shallow copy with the modifiers applied.

        The copy shares the executor (and therefore the cookie jar) with this
        client; replacing attributes on it never affects the original.
        """
        # Copies must share one executor.
        self._ensure_http()
        clone = copy.copy(self)
        for modifier in modifiers:
            modifier(clone)
        return clone

    def new_request(
        self,
        method: str,
        prefix: str,
        url_path: str,
        body: Any = None,
    ) -> httpx.Request:
        """Build a request against the base URL.

        Args:
            method: HTTP method.
            prefix: Leading path segment(s), e.g. ``v1/controlPlanes``.
            url_path: Remaining path, may be empty and may end in ``?query``.
            body: Value to send as JSON, or None for no body.

        Raises:
            InvalidTargetError: If the method or the composed URL is invalid.
            EncodingError: If the body cannot be serialized.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise InvalidTargetError(f"unsupported method: {method}")
        url = join_url(self.base_url, prefix, url_path)

        headers = {
            "Accept": CONTENT_TYPE_JSON,
            "User-Agent": self.user_agent,
        }
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"

        content: bytes | None = None
        if body is not None:
            content = encode_json(body)
            headers["Content-Type"] = CONTENT_TYPE_JSON

        # build_request attaches cookies held by the executor, e.g. a login session.
        return self.http.build_request(method, url, headers=headers, content=content)

    @overload
    async def do(self, request: httpx.Request, target: None = None) -> None: ...

    @overload
    async def do(self, request: httpx.Request, target: type[T]) -> T: ...

    @overload
    async def do(self, request: httpx.Request, target: Any) -> Any: ...

    async def do(self, request: httpx.Request, target: Any = None) -> Any:
        """Send a request and decode the response into ``target``.

        Args:
            request: Request built by ``new_request`` (and possibly modified).
            target: Pydantic model class or any type ``pydantic.TypeAdapter``
                accepts. With None, the body is read and discarded.

        Returns:
            The decoded value, or None when no target is given.

        Raises:
            APIError: On non-2xx responses (via the error handler).
            DecodingError: If a successful body does not match ``target``.
        """
        logger.debug("%s %s", request.method, request.url)
        response = await self.http.send(request)
        try:
            logger.debug(
                "%s %s -> %d", request.method, request.url, response.status_code
            )
            await self._handle_errors(response)
            content = await response.aread()
        finally:
            await response.aclose()

        if target is None:
            return None
        return decode_json(target, content, response.status_code)

    async def _handle_errors(self, response: httpx.Response) -> None:
        if await self.error_handler.handle(response):
            return
        await DefaultErrorHandler().handle(response)


def new_client(*modifiers: ClientModifier) -> HTTPClient:
    """Build a default HTTP client and apply the modifiers in order."""
    client = HTTPClient()
    for modifier in modifiers:
        modifier(client)
    return client


def with_base_url(base_url: str | httpx.URL) -> ClientModifier:
    def modify(client: HTTPClient) -> None:
        client.base_url = parse_base_url(base_url)

    return modify


def with_http(http: httpx.AsyncClient) -> ClientModifier:
    def modify(client: HTTPClient) -> None:
        client.http = http

    return modify


def with_user_agent(user_agent: str) -> ClientModifier:
    def modify(client: HTTPClient) -> None:
        client.user_agent = user_agent

    return modify


def with_error_handler(handler: ResponseErrorHandler) -> ClientModifier:
    def modify(client: HTTPClient) -> None:
        client.error_handler = handler

    return modify


def with_bearer_token(token: str | None) -> ClientModifier:
    def modify(client: HTTPClient) -> None:
        client.bearer_token = token

    return modify


def parse_base_url(base_url: str | httpx.URL) -> httpx.URL:
    """Parse and validate an absolute base URL."""
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidTargetError(f"invalid base URL {base_url!r}: {e}") from e
    if not url.scheme or not url.host:
        raise InvalidTargetError(f"base URL must be absolute: {base_url!r}")
    return url


def join_url(base_url: httpx.URL, prefix: str, url_path: str) -> httpx.URL:
    """Join the base URL path, prefix and sub-path as path components.

    Any ``?query`` carried by the sub-path is kept as the encoded query string.
    """
    relative = "/".join(p.strip("/") for p in (prefix, url_path) if p and p.strip("/"))
    relative, _, query = relative.partition("?")
    parts = [p.strip("/") for p in (base_url.path, relative) if p.strip("/")]
    path = posixpath.normpath("/" + "/".join(parts)) if parts else "/"

    try:
        encoded_query = query.encode("ascii") if query else None
        return base_url.copy_with(path=path, query=encoded_query, fragment=None)
    except (httpx.InvalidURL, UnicodeEncodeError, TypeError, ValueError) as e:
        raise InvalidTargetError(f"invalid request URL for {prefix!r} {url_path!r}: {e}") from e


def encode_json(body: Any) -> bytes:
    """Serialize a request body: aliases on, unset optionals dropped, no escaping."""
    try:
        data = to_jsonable_python(body, by_alias=True, exclude_none=True)
        return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(f"cannot encode request body: {e}", e) from e


@lru_cache(maxsize=None)
def _type_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode_json(target: Any, content: bytes, status_code: int = 0) -> Any:
    """Decode a JSON response body into ``target``."""
    try:
        return _type_adapter(target).validate_json(content)
    except ValidationError as e:
        raise DecodingError(
            f"cannot decode response body: {e}",
            status_code=status_code,
            body=content.decode("utf-8", errors="replace"),
        ) from e
