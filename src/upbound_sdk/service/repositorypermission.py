"""Client for team permissions on package repositories."""

from __future__ import annotations

import enum
from datetime import datetime
from uuid import UUID

from pydantic import Field

from .common import ServiceClient, WireModel

BASE_PATH = "v1/repoPermissions/{organization}/teams/{team_id}"


class PermissionType(str, enum.Enum):
    ADMIN = "admin"
    READ = "read"
    WRITE = "write"
    VIEW = "view"


class RepositoryPermission(WireModel):
    permission: PermissionType


class CreatePermission(WireModel):
    permission: RepositoryPermission
    repository: str


class PermissionIdentifier(WireModel):
    repository: str


class Permission(WireModel):
    team_id: UUID = Field(alias="teamId")
    repository_id: int = Field(0, alias="repositoryId")
    account_id: int = Field(0, alias="accountId")
    privilege: str = ""
    creator_id: int | None = Field(None, alias="creatorId")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    repository_name: str = Field("", alias="repositoryName")


class ListPermissionsResponse(WireModel):
    permissions: list[Permission] = Field(default_factory=list)
    size: int = 0
    page: int = 0
    count: int = 0


def _prefix(organization: str, team_id: UUID | str) -> str:
    return BASE_PATH.format(organization=organization, team_id=team_id)


class RepositoryPermissionsClient(ServiceClient):
    """Grant and revoke a team's access to repositories."""

    async def create(
        self, organization: str, team_id: UUID | str, params: CreatePermission
    ) -> None:
        """Grant a team a permission on a repository.

        Args:
            organization: Organization name.
            team_id: Team UUID.
            params: Repository name and the permission to grant.
        """
        req = self.client.new_request(
            "PUT", _prefix(organization, team_id), params.repository, params.permission
        )
        await self.client.do(req)

    async def delete(
        self, organization: str, team_id: UUID | str, params: PermissionIdentifier
    ) -> None:
        """Revoke a team's permission on a repository."""
        req = self.client.new_request(
            "DELETE", _prefix(organization, team_id), params.repository
        )
        await self.client.do(req)

    async def list(self, organization: str, team_id: UUID | str) -> ListPermissionsResponse:
        """List the repository permissions of a team.

        Returns:
            One page of permissions, with the page, size and count reported by
            the server.
        """
        req = self.client.new_request("GET", _prefix(organization, team_id), "")
        return await self.client.do(req, ListPermissionsResponse)
