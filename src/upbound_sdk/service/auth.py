"""Client for the organization-scoped token exchange endpoint.

Unlike the other endpoints this one is not session based: the caller's ID
token is sent both as the exchange subject and as the bearer credential.
"""

from __future__ import annotations

from urllib.parse import urlencode

import httpx

from .common import AuthMode, ServiceClient, WireModel

API_GROUP_AUTH = "tokenexchange.upbound.io"
API_GROUP_AUTH_VERSION = "v1alpha1"
BASE_PATH = f"apis/{API_GROUP_AUTH}/{API_GROUP_AUTH_VERSION}"
ORG_SCOPED_TOKENS_PATH = "orgscopedtokens"

CONTENT_TYPE_FORM_URL_ENCODED = "application/x-www-form-urlencoded"

# Required prefix of an organization scope.
SCOPE_ORGANIZATIONS_PREFIX = "upbound:org:"

# Access to a space itself.
AUDIENCE_SPACES_API = "upbound:spaces:api"
# Access to the control planes within a space.
AUDIENCE_SPACES_CONTROL_PLANES = "upbound:spaces:controlplanes"

PARAM_GRANT_TYPE = "grant_type"
PARAM_AUDIENCE = "audience"
PARAM_SCOPE = "scope"
PARAM_SUBJECT_TOKEN = "subject_token"
PARAM_SUBJECT_TOKEN_TYPE = "subject_token_type"

# RFC 8693 section 2.1
GRANT_TYPE_TOKEN_EXCHANGE = "urn:ietf:params:oauth:grant-type:token-exchange"
# RFC 8693 section 3
TOKEN_TYPE_ID_TOKEN = "urn:ietf:params:oauth:token-type:id_token"


class TokenExchangeResponse(WireModel):
    access_token: str = ""
    issued_token_type: str = ""
    token_type: str = ""
    expires_in: int = 0


def org_scoped_token_form(org: str, token: str) -> bytes:
    """Encode the token exchange form for an organization-scoped token."""
    return urlencode(
        [
            (PARAM_AUDIENCE, AUDIENCE_SPACES_API),
            (PARAM_AUDIENCE, AUDIENCE_SPACES_CONTROL_PLANES),
            (PARAM_GRANT_TYPE, GRANT_TYPE_TOKEN_EXCHANGE),
            (PARAM_SCOPE, f"{SCOPE_ORGANIZATIONS_PREFIX}{org}"),
            (PARAM_SUBJECT_TOKEN, token),
            (PARAM_SUBJECT_TOKEN_TYPE, TOKEN_TYPE_ID_TOKEN),
        ]
    ).encode("ascii")


class AuthClient(ServiceClient):
    """Exchange ID tokens for organization-scoped access tokens."""

    auth_mode = AuthMode.BEARER

    async def get_org_scoped_token(self, org: str, token: str) -> TokenExchangeResponse:
        """Exchange an ID token for a token scoped to one organization.

        The form body is sent with ``Authorization: Bearer <token>`` and an
        explicit ``Content-Length``; no session cookie is needed.

        Args:
            org: Organization name, sent as the ``upbound:org:<org>`` scope.
            token: ID token to exchange.

        Returns:
            The access token and its metadata.
        """
        prototype = self.client.new_request("POST", BASE_PATH, ORG_SCOPED_TOKENS_PATH)
        content = org_scoped_token_form(org, token)

        headers = httpx.Headers(prototype.headers)
        headers["Content-Type"] = CONTENT_TYPE_FORM_URL_ENCODED
        headers["Content-Length"] = str(len(content))
        headers["Authorization"] = f"Bearer {token}"

        req = httpx.Request(
            prototype.method,
            prototype.url,
            headers=headers,
            content=content,
            extensions=prototype.extensions,
        )
        return await self.client.do(req, TokenExchangeResponse)
