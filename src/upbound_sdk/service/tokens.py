"""Client for the tokens endpoint.

Request bodies are wrapped as ``{"data": {"type": "tokens", ...}}``; the
``type`` tag is fixed and never set by callers.
"""

from __future__ import annotations

import enum
from uuid import UUID

from pydantic import Field

from ..errors import MissingParametersError
from .common import DataSet, ServiceClient, WireModel, data_envelope, id_segment

BASE_PATH = "v1/tokens"

# The only body type the endpoint accepts.
TOKEN_BODY_TYPE = "tokens"


class TokenOwnerType(str, enum.Enum):
    USER = "users"
    CONTROL_PLANE = "controlPlanes"
    ROBOT = "robots"


class TokenAttributes(WireModel):
    name: str


class TokenOwnerData(WireModel):
    type: TokenOwnerType
    id: UUID


class TokenOwner(WireModel):
    data: TokenOwnerData


class TokenRelationships(WireModel):
    owner: TokenOwner = Field(alias="organization")


class TokenCreateParameters(WireModel):
    attributes: TokenAttributes
    relationships: TokenRelationships | None = None


class TokenUpdateParameters(WireModel):
    id: UUID
    attributes: TokenAttributes


class TokenResponse(WireModel):
    data: DataSet


class TokensResponse(WireModel):
    data: list[DataSet] = Field(default_factory=list)


class TokensClient(ServiceClient):
    """Manage API tokens owned by users, robots and control planes."""

    async def create(self, params: TokenCreateParameters) -> TokenResponse:
        """Create a token.

        Args:
            params: Token name and owner.

        Returns:
            The created token.
        """
        body = data_envelope(TOKEN_BODY_TYPE, params)
        req = self.client.new_request("POST", BASE_PATH, "", body)
        return await self.client.do(req, TokenResponse)

    async def get(self, token_id: UUID | str) -> TokenResponse:
        """Get a token by ID.

        Raises:
            NotFoundError: If the token does not exist.
        """
        req = self.client.new_request("GET", BASE_PATH, id_segment(token_id))
        return await self.client.do(req, TokenResponse)

    async def update(self, params: TokenUpdateParameters | None) -> TokenResponse:
        """Update the attributes of an existing token.

        Args:
            params: Token ID and the attributes to change.

        Returns:
            The updated token.

        Raises:
            MissingParametersError: If params is None. Nothing is sent.
        """
        if params is None:
            raise MissingParametersError()
        body = data_envelope(TOKEN_BODY_TYPE, params)
        req = self.client.new_request("PATCH", BASE_PATH, id_segment(params.id), body)
        return await self.client.do(req, TokenResponse)

    async def delete(self, token_id: UUID | str) -> None:
        """Delete a token by ID."""
        req = self.client.new_request("DELETE", BASE_PATH, id_segment(token_id))
        await self.client.do(req)
