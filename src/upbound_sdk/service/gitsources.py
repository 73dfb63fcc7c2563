"""Client for the git sources GitHub login endpoint.

The endpoint answers with a redirect and an HTML body. The caller decides
what to do from the redirect target: a GitHub URL means the user still has
to authorize, an Upbound URL means they already have (or something failed).
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from ..client import HTTPClient
from ..errors import DecodingError, UnsupportedClientError
from .common import ServiceClient

BASE_PATH = "v1/gitSources"
LOGIN_PATH = "github/client/login"
PORT_PARAM = "cli"


@dataclass
class LoginResponse:
    """Outcome of a git sources login.

    Attributes:
        status_code: HTTP status of the unfollowed response.
        redirect_url: Target of the ``Location`` header, or None if absent.
    """

    status_code: int
    redirect_url: httpx.URL | None = None


class GitSourcesClient(ServiceClient):
    async def login(self, port: int = 0) -> LoginResponse:
        """Start a GitHub login for git sources without following the redirect.

        Args:
            port: Local port the CLI listens on for the callback. Zero omits
                the parameter.

        Returns:
            The status code and redirect target of the response.

        Raises:
            UnsupportedClientError: If the configured transport is not an
                ``HTTPClient``; the raw response is needed.
            DecodingError: If the ``Location`` header is not a valid URL.
        """
        client = self.client
        if not isinstance(client, HTTPClient):
            raise UnsupportedClientError(
                f"git sources login needs an HTTPClient, got {type(client).__name__}"
            )

        path = LOGIN_PATH
        if port != 0:
            path += f"?{PORT_PARAM}={int(port)}"
        req = client.new_request("GET", BASE_PATH, path)

        self.logger.debug("%s %s", req.method, req.url)
        response = await client.http.send(req, follow_redirects=False)
        # Only the status and headers matter; the HTML body is never read.
        await response.aclose()
        location = response.headers.get("location")

        result = LoginResponse(status_code=response.status_code)
        if location:
            try:
                result.redirect_url = httpx.URL(location)
            except httpx.InvalidURL as e:
                raise DecodingError(
                    f"invalid redirect location {location!r}: {e}",
                    status_code=response.status_code,
                    body=location,
                ) from e
        return result
