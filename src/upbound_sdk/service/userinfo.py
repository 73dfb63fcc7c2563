"""Client for the endpoint describing the logged-in user."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import ServiceClient, WireModel

BASE_PATH = "v1/self"


class User(WireModel):
    id: int
    username: str = ""
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    email: str = ""
    biography: str = ""
    location: str = ""
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    deleted_at: datetime | None = Field(None, alias="deletedAt")


class UserInfoResponse(WireModel):
    features: list[str] = Field(default_factory=list)
    user: User


class UserInfoClient(ServiceClient):
    async def get(self) -> UserInfoResponse:
        """Get the logged-in user and the features enabled for them."""
        req = self.client.new_request("GET", BASE_PATH, "")
        return await self.client.do(req, UserInfoResponse)
