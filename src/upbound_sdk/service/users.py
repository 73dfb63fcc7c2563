"""Client for the users endpoint."""

from __future__ import annotations

from .common import ServiceClient
from .tokens import TokensResponse

BASE_PATH = "v1/users"
TOKENS_PATH = "tokens"


class UsersClient(ServiceClient):
    async def list_tokens(self, user_id: int) -> TokensResponse:
        """List the tokens owned by a user.

        Args:
            user_id: Numeric user ID.

        Returns:
            The tokens, each as a ``{"data": ...}`` entry.
        """
        req = self.client.new_request("GET", BASE_PATH, f"{user_id}/{TOKENS_PATH}")
        return await self.client.do(req, TokensResponse)
