"""Client for the accounts endpoint."""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import Field

from .common import ServiceClient, WireModel
from .controlplanes import ControlPlaneResponse

BASE_PATH = "v1/accounts"
CONTROL_PLANES_PATH = "controlPlanes"


class AccountType(str, enum.Enum):
    ORGANIZATION = "organization"
    USER = "user"


class OrganizationPermissionGroup(str, enum.Enum):
    # Basic permission on an organization.
    MEMBER = "member"
    # Full access on an organization.
    OWNER = "owner"


class Account(WireModel):
    name: str = ""
    type: str | None = None


class User(WireModel):
    id: int | None = None
    username: str = ""
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    email: str = ""
    biography: str = ""
    location: str = ""
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    deleted_at: datetime | None = Field(None, alias="deletedAt")
    enterprise_trial: datetime | None = Field(None, alias="enterpriseTrial")
    personal_trial: datetime | None = Field(None, alias="personalTrial")


class Organization(WireModel):
    id: int | None = None
    name: str = ""
    display_name: str = Field("", alias="displayName")
    creator_id: int | None = Field(None, alias="creatorId")
    reserved_environments: int = Field(0, alias="reservedEnvironments")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    deleted_at: datetime | None = Field(None, alias="deletedAt")
    expires_at: datetime | None = Field(None, alias="expiresAt")
    delete_at: datetime | None = Field(None, alias="deleteAt")


class AccountResponse(WireModel):
    account: Account = Field(default_factory=Account)
    organization: Organization | None = None
    user: User | None = None


class AccountsClient(ServiceClient):
    """Look up user and organization accounts."""

    async def get(self, name: str) -> AccountResponse:
        """Get a user or organization account by name.

        Args:
            name: Account name.

        Returns:
            The account, with either ``user`` or ``organization`` filled in.

        Raises:
            NotFoundError: If no account has that name.
        """
        req = self.client.new_request("GET", BASE_PATH, name)
        return await self.client.do(req, AccountResponse)

    async def list(self) -> list[AccountResponse]:
        """List the accounts the caller belongs to."""
        req = self.client.new_request("GET", BASE_PATH, "")
        return await self.client.do(req, list[AccountResponse])

    async def list_control_planes(self, name: str) -> list[ControlPlaneResponse]:
        """List the control planes of an account.

        Args:
            name: Account name.

        Returns:
            Every control plane of the account, unpaged.
        """
        req = self.client.new_request("GET", BASE_PATH, f"{name}/{CONTROL_PLANES_PATH}")
        return await self.client.do(req, list[ControlPlaneResponse])
