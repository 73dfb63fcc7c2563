"""Client for the organizations endpoint."""

from __future__ import annotations

import enum
from datetime import datetime
from uuid import UUID

from pydantic import Field

from .common import ServiceClient, WireModel

BASE_PATH = "v1/organizations"
ROBOTS_PATH = "robots"
INVITES_PATH = "invites"
MEMBERS_PATH = "members"


class OrganizationPermissionGroup(str, enum.Enum):
    # Basic permission on an organization.
    MEMBER = "member"
    # Full access on an organization.
    OWNER = "owner"


class Organization(WireModel):
    id: int
    name: str = ""
    display_name: str = Field("", alias="displayName")
    creator_id: int | None = Field(None, alias="creatorId")
    role: str | None = None
    reserved_environments: int = Field(0, alias="reservedEnvironments")


class OrganizationCreateParameters(WireModel):
    name: str
    display_name: str = Field(alias="displayName")


class Robot(WireModel):
    id: UUID
    name: str = ""
    description: str = ""
    team_ids: list[UUID] = Field(default_factory=list, alias="teamIDs")
    token_ids: list[UUID] = Field(default_factory=list, alias="tokenIDs")
    created_at: datetime | None = Field(None, alias="createdAt")


class Invite(WireModel):
    id: int
    email: str = ""
    permission: str | None = None
    created_at: datetime | None = Field(None, alias="createdAt")


class OrganizationInviteCreateParameters(WireModel):
    email: str
    permission: OrganizationPermissionGroup = OrganizationPermissionGroup.MEMBER


class MemberUser(WireModel):
    id: int
    username: str = ""
    name: str = ""
    email: str = ""


class Member(WireModel):
    permission: str | None = None
    user: MemberUser


class OrganizationsClient(ServiceClient):
    """Manage organizations, their robots, invites and members."""

    async def create(self, params: OrganizationCreateParameters) -> None:
        """Create an organization.

        The response carries no body, so nothing is returned.
        """
        req = self.client.new_request("POST", BASE_PATH, "", params)
        await self.client.do(req)

    async def get(self, org_id: int) -> Organization:
        """Get an organization by numeric ID.

        Raises:
            NotFoundError: If the organization does not exist.
        """
        req = self.client.new_request("GET", BASE_PATH, str(org_id))
        return await self.client.do(req, Organization)

    async def list(self) -> list[Organization]:
        """List the organizations the caller belongs to."""
        req = self.client.new_request("GET", BASE_PATH, "")
        return await self.client.do(req, list[Organization])

    async def list_robots(self, org_id: int) -> list[Robot]:
        """List the robots of an organization."""
        req = self.client.new_request("GET", BASE_PATH, f"{org_id}/{ROBOTS_PATH}")
        return await self.client.do(req, list[Robot])

    async def delete(self, org_id: int) -> None:
        """Delete an organization by ID."""
        req = self.client.new_request("DELETE", BASE_PATH, str(org_id))
        await self.client.do(req)

    async def list_invites(self, org_id: int) -> list[Invite]:
        """List the pending invites of an organization."""
        req = self.client.new_request("GET", BASE_PATH, f"{org_id}/{INVITES_PATH}")
        return await self.client.do(req, list[Invite])

    async def create_invite(
        self, org_id: int, params: OrganizationInviteCreateParameters
    ) -> None:
        """Invite someone to an organization.

        Args:
            org_id: Organization ID.
            params: Invitee email and the permission they get on acceptance.
        """
        req = self.client.new_request("POST", BASE_PATH, f"{org_id}/{INVITES_PATH}", params)
        await self.client.do(req)

    async def delete_invite(self, org_id: int, invite_id: int) -> None:
        """Withdraw a pending invite."""
        req = self.client.new_request(
            "DELETE", BASE_PATH, f"{org_id}/{INVITES_PATH}/{invite_id}"
        )
        await self.client.do(req)

    async def list_members(self, org_id: int) -> list[Member]:
        """List the members of an organization with their permissions."""
        req = self.client.new_request("GET", BASE_PATH, f"{org_id}/{MEMBERS_PATH}")
        return await self.client.do(req, list[Member])

    async def remove_member(self, org_id: int, user_id: int) -> None:
        """Remove a user from an organization.

        Args:
            org_id: Organization ID.
            user_id: ID of the member to remove.
        """
        req = self.client.new_request(
            "DELETE", BASE_PATH, f"{org_id}/{MEMBERS_PATH}/{user_id}"
        )
        await self.client.do(req)
