"""Client for the session login endpoint.

A successful login leaves a session cookie in the executor's cookie jar.
It must complete before any session-authenticated call is made on the same
client.
"""

from __future__ import annotations

from pydantic import Field

from .common import ServiceClient, WireModel

BASE_PATH = "v1/login"


class LoginParameters(WireModel):
    username: str = Field(serialization_alias="id")
    password: str


class LoginClient(ServiceClient):
    async def login(self, username: str, password: str) -> None:
        """Log in with a username and password.

        On success the session cookie is stored in the executor's cookie jar and
        sent with every later request made through the same client.

        Raises:
            UnauthorizedError: If the credentials are rejected.
        """
        params = LoginParameters(username=username, password=password)
        req = self.client.new_request("POST", BASE_PATH, "", params)
        await self.client.do(req)
